"""One-shot request functions.

Each call goes through a :class:`Requester`. When ``client`` is given the
requester borrows it, otherwise a client is created for the single call and
closed before returning.
"""

from typing import Any, Union

from httpx import URL, Client
from typing_extensions import TypeVar

from ._services import Requester
from ._services._base_service import JSON
from ._utils import RequestOption

T = TypeVar("T", default=Any)


def request(
    method: str,
    url: Union[URL, str],
    *options: RequestOption,
    response_type: type[T] = JSON,
    client: Client | None = None,
) -> T:
    with Requester(client=client) as requester:
        return requester.execute(method, url, *options, response_type=response_type)


def get(
    url: Union[URL, str],
    *options: RequestOption,
    response_type: type[T] = JSON,
    client: Client | None = None,
) -> T:
    return request("GET", url, *options, response_type=response_type, client=client)


def post(
    url: Union[URL, str],
    *options: RequestOption,
    response_type: type[T] = JSON,
    client: Client | None = None,
) -> T:
    return request("POST", url, *options, response_type=response_type, client=client)


def put(
    url: Union[URL, str],
    *options: RequestOption,
    response_type: type[T] = JSON,
    client: Client | None = None,
) -> T:
    return request("PUT", url, *options, response_type=response_type, client=client)


def delete(
    url: Union[URL, str],
    *options: RequestOption,
    response_type: type[T] = JSON,
    client: Client | None = None,
) -> T:
    return request(
        "DELETE", url, *options, response_type=response_type, client=client
    )
