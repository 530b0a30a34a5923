"""Transport errors raised by the HTTP clients and the source downloader."""


class ClientError(Exception):
    """Base exception for all transport errors."""

    def __init__(self, message: str, *args, url: str | None = None, **kwargs):
        self.message = message
        self.url = url
        super().__init__(message, *args, **kwargs)


class ConnectionError(ClientError):
    """Raised when a network connection fails or times out."""

    pass


class APIError(ClientError):
    """Raised when the remote origin returns a non-2xx response."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)


class RateLimitError(APIError):
    """Raised when the remote origin returns a 429 rate limit response."""

    def __init__(self, message: str = "Rate limit exceeded", url: str | None = None):
        super().__init__(message, status_code=429, url=url)


class NotFoundError(APIError):
    """Raised when the remote origin returns a 404 not found response."""

    def __init__(self, message: str = "Resource not found", url: str | None = None):
        super().__init__(message, status_code=404, url=url)


class ValidationError(ClientError):
    """Raised when response data fails schema validation."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)
