from .base import Endpoint, OfdClient, Result
from .errors import ErrorKind, OfdNetworkError, bilingual_message
from .framing import read_frame
from .tcp import OfdTcpClient

__all__ = [
    "Endpoint",
    "ErrorKind",
    "OfdClient",
    "OfdNetworkError",
    "OfdTcpClient",
    "Result",
    "bilingual_message",
    "read_frame",
]
