import os

from pydantic import BaseModel, Field

from ._utils.constants import DEFAULT_TIMEOUT, ENV_BASE_URL, ENV_TIMEOUT


class Config(BaseModel):
    """Settings for HTTP clients created by a requester.

    Only clients the requester creates itself are shaped by this; an injected
    client is used unchanged.
    """

    base_url: str = ""
    timeout: float | None = DEFAULT_TIMEOUT
    headers: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "Config":
        timeout = os.getenv(ENV_TIMEOUT)
        return cls(
            base_url=os.getenv(ENV_BASE_URL, ""),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )

    def client_kwargs(self) -> dict[str, object]:
        return {
            "base_url": self.base_url,
            "timeout": self.timeout,
            "headers": self.headers,
        }
