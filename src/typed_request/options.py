"""Composable request options.

Each constructor returns a function mutating a :class:`RequestConfiguration`.
Options are applied in the order they are passed to a request; on a repeated
key the last one wins.

Examples:
    ```python
    from typed_request import get, with_accept, with_parameter

    user = get(
        "https://api.example.com/users",
        with_accept(),
        with_parameter("name", "ada"),
        response_type=User,
    )
    ```
"""

from logging import getLogger
from typing import Any, Mapping, Union

from pydantic_core import PydanticSerializationError, to_json

from ._utils._request_spec import RequestConfiguration, RequestOption
from ._utils.constants import APPLICATION_JSON, HEADER_ACCEPT, HEADER_CONTENT_TYPE

logger = getLogger("typed_request")


def with_header(key: str, value: str) -> RequestOption:
    def option(config: RequestConfiguration) -> None:
        config.headers[key] = value

    return option


def with_headers(headers: Mapping[str, str]) -> RequestOption:
    def option(config: RequestConfiguration) -> None:
        config.headers.update(headers)

    return option


def with_accept() -> RequestOption:
    """Ask the server for a JSON response."""
    return with_header(HEADER_ACCEPT, APPLICATION_JSON)


def with_body(body: Any) -> RequestOption:
    """Serialize ``body`` to JSON and attach it as the request payload.

    Also sets ``Content-Type: application/json``. Pydantic models and
    dataclasses are serialized the same way pydantic dumps them.

    If ``body`` cannot be serialized the payload is left unset and no error
    reaches the caller; the failure is only logged.
    """

    def option(config: RequestConfiguration) -> None:
        try:
            payload = to_json(body)
        except (PydanticSerializationError, ValueError) as e:
            logger.warning(f"Request body left unset, serialization failed: {e}")
            return

        config.body = payload
        config.headers[HEADER_CONTENT_TYPE] = APPLICATION_JSON

    return option


def with_parameter(key: str, value: str) -> RequestOption:
    """Set a query parameter. Escaping happens when the request is built."""

    def option(config: RequestConfiguration) -> None:
        config.params[key] = value

    return option


def with_parameters(parameters: Mapping[str, str]) -> RequestOption:
    def option(config: RequestConfiguration) -> None:
        config.params.update(parameters)

    return option


def with_cookie(name: str, value: str) -> RequestOption:
    def option(config: RequestConfiguration) -> None:
        config.cookies[name] = value

    return option


def with_cookies(cookies: Mapping[str, str]) -> RequestOption:
    def option(config: RequestConfiguration) -> None:
        config.cookies.update(cookies)

    return option


def with_timeout(seconds: Union[int, float]) -> RequestOption:
    """Bound the send step of a single request to ``seconds``."""

    def option(config: RequestConfiguration) -> None:
        config.timeout = seconds

    return option
