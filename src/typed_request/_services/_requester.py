from typing import Any, Union

import httpx
from httpx import URL, AsyncClient, Client
from typing_extensions import TypeVar

from .._config import Config
from .._utils import (
    RequestOption,
    decode_json,
    is_successful_code,
    raise_as_request_error,
    status_error,
)
from .._utils.constants import MESSAGE_DECODE_FAILED, MESSAGE_SEND_FAILED
from ._base_service import JSON, READ_ERRORS, BaseRequester

# Any when the caller does not pass response_type
T = TypeVar("T", default=Any)


class Requester(BaseRequester):
    """Issues HTTP requests and decodes JSON responses into typed results.

    The requester either borrows an ``httpx.Client`` passed in by the caller or
    creates one from ``config``. Only a client it created is closed by
    :meth:`close`. A single client may serve many concurrent calls.

    Examples:
        ```python
        from typed_request import Requester, with_accept

        with Requester() as requester:
            slideshow = requester.get(
                "https://httpbin.org/json", with_accept(), response_type=Slideshow
            )
        ```
    """

    def __init__(
        self, config: Config | None = None, client: Client | None = None
    ) -> None:
        super().__init__(config)
        self._owns_client = client is None
        self._client = (
            client if client is not None else Client(**self._config.client_kwargs())
        )

    def execute(
        self,
        method: str,
        url: Union[URL, str],
        *options: RequestOption,
        response_type: type[T] = JSON,
    ) -> T:
        """Send a request and decode its JSON response.

        Args:
            method: HTTP method.
            url: Absolute URL, or a path relative to the client's base URL.
            *options: Request options, applied in order.
            response_type: Type the 2xx response body is decoded into.

        Returns:
            The decoded response body.

        Raises:
            RequestError: If the request cannot be built or sent, the status
                code is outside [200, 300), or the body cannot be decoded.
        """
        request = self._build_request(self._client, method, url, options)

        with raise_as_request_error(MESSAGE_SEND_FAILED, httpx.RequestError):
            response = self._client.send(request, stream=True)

        try:
            self._log_response(response)
            if not is_successful_code(response.status_code):
                try:
                    body = response.read()
                except READ_ERRORS:
                    body = b""
                raise status_error(response.status_code, body)

            with raise_as_request_error(MESSAGE_DECODE_FAILED, *READ_ERRORS):
                raw = response.read()
            return decode_json(raw, response_type)
        finally:
            response.close()

    def get(
        self,
        url: Union[URL, str],
        *options: RequestOption,
        response_type: type[T] = JSON,
    ) -> T:
        return self.execute("GET", url, *options, response_type=response_type)

    def post(
        self,
        url: Union[URL, str],
        *options: RequestOption,
        response_type: type[T] = JSON,
    ) -> T:
        return self.execute("POST", url, *options, response_type=response_type)

    def put(
        self,
        url: Union[URL, str],
        *options: RequestOption,
        response_type: type[T] = JSON,
    ) -> T:
        return self.execute("PUT", url, *options, response_type=response_type)

    def delete(
        self,
        url: Union[URL, str],
        *options: RequestOption,
        response_type: type[T] = JSON,
    ) -> T:
        return self.execute("DELETE", url, *options, response_type=response_type)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Requester":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncRequester(BaseRequester):
    """Async counterpart of :class:`Requester` over ``httpx.AsyncClient``.

    Cancelling the awaiting task releases the response, and a per-request
    deadline can be set with :func:`~typed_request.options.with_timeout`.
    """

    def __init__(
        self, config: Config | None = None, client: AsyncClient | None = None
    ) -> None:
        super().__init__(config)
        self._owns_client = client is None
        self._client = (
            client
            if client is not None
            else AsyncClient(**self._config.client_kwargs())
        )

    async def execute(
        self,
        method: str,
        url: Union[URL, str],
        *options: RequestOption,
        response_type: type[T] = JSON,
    ) -> T:
        request = self._build_request(self._client, method, url, options)

        with raise_as_request_error(MESSAGE_SEND_FAILED, httpx.RequestError):
            response = await self._client.send(request, stream=True)

        try:
            self._log_response(response)
            if not is_successful_code(response.status_code):
                try:
                    body = await response.aread()
                except READ_ERRORS:
                    body = b""
                raise status_error(response.status_code, body)

            with raise_as_request_error(MESSAGE_DECODE_FAILED, *READ_ERRORS):
                raw = await response.aread()
            return decode_json(raw, response_type)
        finally:
            await response.aclose()

    async def get(
        self,
        url: Union[URL, str],
        *options: RequestOption,
        response_type: type[T] = JSON,
    ) -> T:
        return await self.execute("GET", url, *options, response_type=response_type)

    async def post(
        self,
        url: Union[URL, str],
        *options: RequestOption,
        response_type: type[T] = JSON,
    ) -> T:
        return await self.execute("POST", url, *options, response_type=response_type)

    async def put(
        self,
        url: Union[URL, str],
        *options: RequestOption,
        response_type: type[T] = JSON,
    ) -> T:
        return await self.execute("PUT", url, *options, response_type=response_type)

    async def delete(
        self,
        url: Union[URL, str],
        *options: RequestOption,
        response_type: type[T] = JSON,
    ) -> T:
        return await self.execute("DELETE", url, *options, response_type=response_type)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncRequester":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
