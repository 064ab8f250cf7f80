from ._decoding import decode_json, is_successful_code, status_error
from ._errors import raise_as_request_error
from ._request_spec import RequestConfiguration, RequestOption, build_configuration

__all__ = [
    "RequestConfiguration",
    "RequestOption",
    "build_configuration",
    "decode_json",
    "is_successful_code",
    "raise_as_request_error",
    "status_error",
]
