from contextlib import contextmanager
from typing import Generator

from ..models.errors import RequestError


@contextmanager
def raise_as_request_error(
    message: str, *exceptions: type[BaseException]
) -> Generator[None, None, None]:
    """Context manager converting the given exception types into a RequestError.

    Used around the request construction and send steps, where no response
    exists yet, so the resulting error always carries code 0.

    Args:
        message: Message of the raised RequestError.
        *exceptions: Exception types to convert. Anything else propagates.

    Raises:
        RequestError: When the wrapped block raises one of ``exceptions``.
    """
    try:
        yield
    except exceptions as e:
        raise RequestError(message) from e
