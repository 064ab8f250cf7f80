from .errors import RequestError

__all__ = ["RequestError"]
