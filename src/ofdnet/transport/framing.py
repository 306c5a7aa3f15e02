from __future__ import annotations

import asyncio
import logging
import struct
from typing import Literal, Protocol

from ofdnet.config import DEFAULT_HEADER_SIZE

from .errors import closed_before, message_too_large, message_too_short

logger = logging.getLogger(__name__)

TOTAL_SIZE_OFFSET = 4
MAX_MESSAGE_SIZE = 2**31 - 1

FramePart = Literal["header", "payload"]

_PART_NAMES_RU: dict[str, str] = {
    "header": "заголовок",
    "payload": "тело",
}


class ByteStream(Protocol):
    """Anything with StreamReader-style `read`: up to n bytes, b"" at end of input."""

    async def read(self, n: int = -1) -> bytes: ...


async def read_exact(
    stream: ByteStream,
    count: int,
    *,
    part: FramePart = "payload",
    timeout: float | None = None,
) -> bytes:
    """
    Read exactly `count` bytes, looping over short reads.

    `timeout` bounds every individual read, not the whole loop.
    """

    if count < 0:
        raise ValueError("count must be >= 0")
    buf = bytearray()
    while len(buf) < count:
        chunk = await asyncio.wait_for(stream.read(count - len(buf)), timeout=timeout)
        if not chunk:
            raise closed_before(_PART_NAMES_RU[part], part)
        buf.extend(chunk)
    return bytes(buf)


def declared_size(header: bytes) -> int:
    if len(header) < TOTAL_SIZE_OFFSET + 4:
        raise ValueError(f"header too short for the length field: {len(header)} bytes")
    return int(struct.unpack_from("<I", header, TOTAL_SIZE_OFFSET)[0])


def check_declared_size(total_size: int, header_size: int) -> None:
    if total_size < header_size:
        raise message_too_short(total_size, header_size)
    if total_size > MAX_MESSAGE_SIZE:
        raise message_too_large(total_size, MAX_MESSAGE_SIZE)


async def read_frame(
    stream: ByteStream,
    *,
    header_size: int = DEFAULT_HEADER_SIZE,
    timeout: float | None = None,
) -> bytes:
    """
    Read one complete message: a fixed-size header whose bytes [4:8) hold the
    little-endian total length (header included), then the rest of the body.

    The declared length is validated before any payload byte is read. A
    declared length equal to the header size yields a header-only message.
    """

    header = await read_exact(stream, header_size, part="header", timeout=timeout)
    total_size = declared_size(header)
    check_declared_size(total_size, header_size)

    payload_size = total_size - header_size
    logger.debug("Header read; declared total=%s payload=%s", total_size, payload_size)
    payload = await read_exact(stream, payload_size, part="payload", timeout=timeout)
    return header + payload
