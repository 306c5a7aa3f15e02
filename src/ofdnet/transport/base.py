from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .errors import OfdNetworkError


@dataclass(frozen=True, slots=True)
class Endpoint:
    host: str
    port: int

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True, slots=True)
class Result:
    """Outcome of one exchange: either the full response or a classified error."""

    value: bytes | None = None
    error: OfdNetworkError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Result needs exactly one of value or error")

    @classmethod
    def success(cls, value: bytes) -> Result:
        return cls(value=bytes(value))

    @classmethod
    def failure(cls, error: OfdNetworkError) -> Result:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> bytes:
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise ValueError("Result holds neither value nor error")
        return self.value


class OfdClient(Protocol):
    """
    Sends one complete request and returns one complete response.

    Contract:
    - request and response are both header + payload
    - every call uses its own connection, closed before the call returns
    - the request must be at least as long as the header, otherwise the call
      fails with a protocol violation before any network activity
    """

    async def send_and_receive(self, endpoint: Endpoint, request: bytes) -> Result: ...
