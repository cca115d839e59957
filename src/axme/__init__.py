from .exceptions import AxmeClientError, AxmeConfigError, AxmeDecodeError, AxmeHTTPError, AxmeTransportError
from .config import ClientConfig
from .models import RequestOptions, RegisterNickRequest, RenameNickRequest, UpdateUserProfileRequest
from .client import AxmeClient

__all__ = [
    "AxmeClient",
    "ClientConfig",
    "RequestOptions",
    "RegisterNickRequest",
    "RenameNickRequest",
    "UpdateUserProfileRequest",
    "AxmeClientError",
    "AxmeConfigError",
    "AxmeDecodeError",
    "AxmeHTTPError",
    "AxmeTransportError",
]
