"""Main entry point for the Reflect MCP server."""

from __future__ import annotations

import argparse
import sys

from reflect_mcp.server import run_server

TRANSPORTS = ("streamable-http", "sse", "stdio")


def port_number(value: str) -> int:
    try:
        port = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from e
    if not 0 < port < 65536:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse ``[transport] [host] [port]`` positional arguments."""
    parser = argparse.ArgumentParser(prog="reflect-mcp", description="Reflect MCP server")
    parser.add_argument("transport", nargs="?", default="streamable-http", choices=TRANSPORTS)
    parser.add_argument("host", nargs="?", default="0.0.0.0")
    parser.add_argument("port", nargs="?", default=8000, type=port_number)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    if args.transport != "stdio":
        print(
            f"Starting Reflect MCP server on {args.host}:{args.port} with {args.transport} transport...",
            file=sys.stderr,
        )
    run_server(transport=args.transport, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
