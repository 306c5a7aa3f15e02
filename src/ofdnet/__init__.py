from .config import ClientConfig, ConfigError
from .transport import Endpoint, ErrorKind, OfdClient, OfdNetworkError, OfdTcpClient, Result

__all__ = [
    "ClientConfig",
    "ConfigError",
    "Endpoint",
    "ErrorKind",
    "OfdClient",
    "OfdNetworkError",
    "OfdTcpClient",
    "Result",
]
