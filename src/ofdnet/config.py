from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_HEADER_SIZE = 18
DEFAULT_TIMEOUT_MS = 7_000

# Bytes [4:8) carry the total length.
MIN_HEADER_SIZE = 8

ENV_HEADER_SIZE = "OFD_HEADER_SIZE"
ENV_TIMEOUT_MS = "OFD_TIMEOUT_MS"


class ConfigError(ValueError):
    """Raised when client settings are out of range or cannot be parsed."""


@dataclass(frozen=True, slots=True)
class ClientConfig:
    header_size: int = DEFAULT_HEADER_SIZE
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if self.header_size < MIN_HEADER_SIZE:
            raise ConfigError(
                f"header_size must be >= {MIN_HEADER_SIZE}, got {self.header_size}"
            )
        if self.timeout_ms <= 0:
            raise ConfigError(f"timeout_ms must be > 0, got {self.timeout_ms}")

    @property
    def timeout(self) -> float:
        return self.timeout_ms / 1000.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        env = os.environ if environ is None else environ
        return cls(
            header_size=_int_setting(env, ENV_HEADER_SIZE, DEFAULT_HEADER_SIZE),
            timeout_ms=_int_setting(env, ENV_TIMEOUT_MS, DEFAULT_TIMEOUT_MS),
        )


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e
