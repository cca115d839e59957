class AxmeClientError(Exception):
    """Base exception for all client errors."""


class AxmeConfigError(AxmeClientError, ValueError):
    """Raised when the client is constructed without a base URL or API key."""


class AxmeTransportError(AxmeClientError):
    """Raised when the request never produced an HTTP response (connect, timeout, read)."""


class AxmeDecodeError(AxmeClientError, ValueError):
    """Raised when a payload cannot be encoded or a 2xx body is not a JSON object."""


class AxmeHTTPError(AxmeClientError):
    """Raised for non-2xx HTTP responses. Carries the status code and the raw body."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"axme request failed with status {status_code}")
        self.status_code = status_code
        self.body = body
