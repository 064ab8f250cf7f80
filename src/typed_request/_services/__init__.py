from ._requester import AsyncRequester, Requester

__all__ = ["AsyncRequester", "Requester"]
