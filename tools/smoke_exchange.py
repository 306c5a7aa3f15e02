from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from ofdnet.config import ClientConfig, ConfigError
from ofdnet.transport.base import Endpoint
from ofdnet.transport.errors import ErrorKind
from ofdnet.transport.framing import declared_size
from ofdnet.transport.tcp import OfdTcpClient


def _load_request(args: argparse.Namespace) -> bytes:
    if args.request_file is not None:
        return Path(args.request_file).read_bytes()
    return bytes.fromhex(args.request_hex)


async def _run(args: argparse.Namespace) -> int:
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")

    try:
        env_cfg = ClientConfig.from_env()
        cfg = ClientConfig(
            header_size=args.header_size if args.header_size is not None else env_cfg.header_size,
            timeout_ms=args.timeout_ms if args.timeout_ms is not None else env_cfg.timeout_ms,
        )
        request = _load_request(args)
    except (ConfigError, OSError, ValueError) as e:
        print(f"error: {e}")
        return 2

    client = OfdTcpClient(cfg)
    result = await client.send_and_receive(Endpoint(host=args.host, port=args.port), request)
    if result.error is not None:
        match result.error.kind:
            case ErrorKind.TIMEOUT_NO_RESPONSE:
                label = "timeout"
            case ErrorKind.PROTOCOL_VIOLATION:
                label = "protocol"
            case ErrorKind.TRANSPORT_FAILURE:
                label = "transport"
        print({"ok": False, "kind": label, "message": result.error.message})
        return 1

    response = result.unwrap()
    print(
        {
            "ok": True,
            "declared_size": declared_size(response),
            "size": len(response),
            "hex": response.hex(),
        }
    )
    return 0


def main() -> int:
    p = argparse.ArgumentParser(description="Send one framed request to an OFD server.")
    p.add_argument("--host", type=str, required=True, help="Server host")
    p.add_argument("--port", type=int, required=True, help="Server port")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--request-file", type=str, default=None, help="File with raw request bytes")
    src.add_argument("--request-hex", type=str, default=None, help="Request bytes as hex")
    p.add_argument(
        "--header-size",
        type=int,
        default=None,
        help="Header size in bytes (default: $OFD_HEADER_SIZE or 18)",
    )
    p.add_argument(
        "--timeout-ms",
        type=int,
        default=None,
        help="Connect/read timeout in ms (default: $OFD_TIMEOUT_MS or 7000)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args()
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
