from dataclasses import dataclass, field
from typing import Callable, Union


@dataclass
class RequestConfiguration:
    """Mutable bag of request settings built up by request options.

    Every map starts empty and the body starts absent. Options mutate the
    configuration in the order they are given; on a repeated key the last
    write wins.
    """

    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: Union[int, float] | None = None


RequestOption = Callable[[RequestConfiguration], None]


def build_configuration(*options: RequestOption) -> RequestConfiguration:
    config = RequestConfiguration()
    for option in options:
        option(config)
    return config
