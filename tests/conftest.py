from __future__ import annotations

import struct
from collections.abc import Callable
from pathlib import Path

import pytest

FrameBuilder = Callable[..., bytes]


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    _ = config
    for item in items:
        p = Path(str(item.fspath))
        parts = p.parts
        if "tests" in parts and "unit" in parts:
            item.add_marker(pytest.mark.unit)


def _build_frame(
    payload: bytes = b"",
    *,
    header_size: int = 18,
    total_size: int | None = None,
) -> bytes:
    # Opaque header bytes around the length field, so pass-through is observable.
    total = header_size + len(payload) if total_size is None else total_size
    prefix = b"\x01\x02\x03\x04"
    tail = bytes((0xA0 + i) & 0xFF for i in range(header_size - 8))
    return prefix + struct.pack("<I", total) + tail + payload


@pytest.fixture
def build_frame() -> FrameBuilder:
    return _build_frame
