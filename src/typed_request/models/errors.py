class RequestError(Exception):
    """Raised when a request could not be completed or decoded.

    A single error type covers every failure of a call. ``code`` is the HTTP
    status of the response, or 0 when the failure happened before a response
    was received or while decoding a successful one. ``body`` holds the raw
    response payload for non-2xx responses and is empty otherwise.
    """

    def __init__(self, message: str, code: int = 0, body: bytes = b"") -> None:
        self.message = message
        self.code = code
        self.body = body
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"RequestError(code={self.code}, message={self.message!r})"

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")
