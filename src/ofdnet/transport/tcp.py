from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

from ofdnet.config import ClientConfig

from .base import Endpoint, Result
from .errors import OfdNetworkError, request_too_short, timeout_no_response, transport_failure
from .framing import read_frame

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OfdTcpClient:
    """
    TCP client that opens a fresh connection per call, writes the request,
    reads exactly one response frame and closes the connection.

    `config.timeout_ms` bounds connecting, draining the write buffer and every
    single read separately. Nothing is shared between calls, so one instance
    may serve any number of concurrent calls.
    """

    config: ClientConfig = field(default_factory=ClientConfig)

    async def send_and_receive(self, endpoint: Endpoint, request: bytes) -> Result:
        header_size = self.config.header_size
        if len(request) < header_size:
            return Result.failure(request_too_short(len(request), header_size))

        try:
            response = await self._exchange(endpoint, bytes(request))
        except OfdNetworkError as e:
            logger.info("Exchange with %s failed: %s", endpoint, e.kind.name)
            return Result.failure(e)
        except TimeoutError as e:
            logger.info("Exchange with %s timed out after %sms", endpoint, self.config.timeout_ms)
            return Result.failure(timeout_no_response(self.config.timeout_ms, cause=e))
        except Exception as e:  # noqa: BLE001
            logger.info("Exchange with %s failed: %s", endpoint, type(e).__name__, exc_info=e)
            return Result.failure(transport_failure(e))
        return Result.success(response)

    async def _exchange(self, endpoint: Endpoint, request: bytes) -> bytes:
        timeout = self.config.timeout
        async with self._connection(endpoint) as (reader, writer):
            logger.debug("Sending %s bytes to %s", len(request), endpoint)
            writer.write(request)
            await asyncio.wait_for(writer.drain(), timeout=timeout)

            response = await read_frame(
                reader, header_size=self.config.header_size, timeout=timeout
            )
            logger.debug("Received %s bytes from %s", len(response), endpoint)
            return response

    @asynccontextmanager
    async def _connection(
        self, endpoint: Endpoint
    ) -> AsyncIterator[tuple[asyncio.StreamReader, asyncio.StreamWriter]]:
        logger.debug("Connecting to %s", endpoint)
        reader, writer = await asyncio.wait_for(
            asyncio.open_connection(endpoint.host, endpoint.port),
            timeout=self.config.timeout,
        )
        try:
            yield reader, writer
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except Exception as e:  # noqa: BLE001
                logger.debug("Ignoring error while closing connection to %s", endpoint, exc_info=e)
            logger.debug("Connection to %s closed", endpoint)
