from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from ..models.errors import RequestError
from .constants import MESSAGE_DECODE_FAILED

T = TypeVar("T")

# pydantic error types reporting a value of the wrong JSON type
_TYPE_MISMATCH_SUFFIXES = ("_type", "_parsing")


def decode_json(raw: bytes, response_type: type[T]) -> T:
    """Decode a JSON payload into ``response_type``.

    Validation is strict: JSON values of the wrong type are not coerced.

    Raises:
        RequestError: With code 0 when the payload is not valid JSON or does
            not match ``response_type``.
    """
    try:
        return TypeAdapter(response_type).validate_json(raw, strict=True)
    except ValidationError as e:
        raise RequestError(decode_failure_message(e)) from e


def decode_failure_message(error: ValidationError) -> str:
    for detail in error.errors():
        location = detail["loc"]
        if location and detail["type"].endswith(_TYPE_MISMATCH_SUFFIXES):
            field_name = ".".join(str(part) for part in location)
            return f'failed to decode field "{field_name}"'
    return MESSAGE_DECODE_FAILED


def is_successful_code(code: int) -> bool:
    return 200 <= code < 300


def status_error(code: int, body: bytes) -> RequestError:
    return RequestError(
        f"status code does not indicate success: {code}", code=code, body=body
    )
