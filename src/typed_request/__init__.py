"""Typed JSON requests over httpx.

Verb functions send a request configured by composable options and decode a
successful JSON response into the requested type. Every failure is raised as
:class:`RequestError`.
"""

from ._config import Config
from ._requests import delete, get, post, put, request
from ._services import AsyncRequester, Requester
from ._utils import RequestConfiguration, RequestOption
from .models.errors import RequestError
from .options import (
    with_accept,
    with_body,
    with_cookie,
    with_cookies,
    with_header,
    with_headers,
    with_parameter,
    with_parameters,
    with_timeout,
)

__all__ = [
    "AsyncRequester",
    "Config",
    "RequestConfiguration",
    "RequestError",
    "RequestOption",
    "Requester",
    "delete",
    "get",
    "post",
    "put",
    "request",
    "with_accept",
    "with_body",
    "with_cookie",
    "with_cookies",
    "with_header",
    "with_headers",
    "with_parameter",
    "with_parameters",
    "with_timeout",
]
