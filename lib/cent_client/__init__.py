from .client import CentClient
from .config_types import ClientConfig
from .errors import CentClientError, ConfigError, ErrorKind, NetworkError, RequestError, ResponseError

__all__ = [
    "CentClient",
    "ClientConfig",
    "CentClientError",
    "ConfigError",
    "ErrorKind",
    "NetworkError",
    "RequestError",
    "ResponseError",
]
