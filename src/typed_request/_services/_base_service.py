import re
from logging import getLogger
from typing import Any, Iterable, Union

import httpx
from httpx import URL, AsyncClient, Client, Request, Response

from .._config import Config
from .._utils import RequestOption, build_configuration, raise_as_request_error
from .._utils.constants import MESSAGE_CREATE_FAILED

# Response type used when the caller does not name one: plain JSON values.
JSON: Any = Any

# Raised by httpx while a request is being built from a method, URL and options.
CONSTRUCTION_ERRORS = (httpx.InvalidURL, ValueError, TypeError)

# Raised by httpx while reading a response body stream.
READ_ERRORS = (httpx.HTTPError, httpx.StreamError)

# RFC 7230 token grammar for request methods
_METHOD_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


class BaseRequester:
    def __init__(self, config: Config | None = None) -> None:
        self._logger = getLogger("typed_request")
        self._config = config or Config()

    def _build_request(
        self,
        client: Union[Client, AsyncClient],
        method: str,
        url: Union[URL, str],
        options: Iterable[RequestOption],
    ) -> Request:
        request_config = build_configuration(*options)

        kwargs: dict[str, Any] = {}
        if request_config.timeout is not None:
            kwargs["timeout"] = request_config.timeout

        with raise_as_request_error(MESSAGE_CREATE_FAILED, *CONSTRUCTION_ERRORS):
            if not _METHOD_TOKEN.fullmatch(method):
                raise ValueError(f"Invalid HTTP method: {method!r}")

            request = client.build_request(
                method,
                url,
                content=request_config.body,
                headers=request_config.headers,
                cookies=request_config.cookies,
                **kwargs,
            )
            # merged into any query already present in the URL
            if request_config.params:
                request.url = request.url.copy_merge_params(request_config.params)

        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {request.headers}")
        return request

    def _log_response(self, response: Response) -> None:
        self._logger.debug(f"Response: {response.status_code} {response.request.url}")
