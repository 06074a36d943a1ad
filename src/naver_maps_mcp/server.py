#!/usr/bin/env python3
"""
Naver Maps MCP Server - Entry Point

Provides geocoding, reverse geocoding, and driving directions via the Naver
Maps API. Runs over stdio by default (for Claude Desktop and other MCP
hosts) or over HTTP with ``--web``.
"""

import argparse
import logging
import sys

from .config import Settings, load_env_file
from .constants import ServerConfig
from .exceptions import ConfigurationError

# Load environment variables from the nearest .env file
load_env_file()

logger = logging.getLogger(__name__)

# Import mcp instance and the shared Naver client from async server
from .async_server import client, mcp  # noqa: E402

EPILOG = """\
examples:
  naver-maps-mcp                     run the MCP server over stdio
  naver-maps-mcp --web               run the MCP server over HTTP
  naver-maps-mcp --web --port=4000   run the HTTP server on port 4000
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=ServerConfig.NAME,
        description=ServerConfig.DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--web", action="store_true", help="Run the HTTP transport instead of stdio"
    )
    parser.add_argument(
        "--host",
        default=ServerConfig.DEFAULT_HOST,
        help=f"Host for HTTP mode (default: {ServerConfig.DEFAULT_HOST})",
    )
    parser.add_argument(
        "--port", type=int, default=None, help="Port for HTTP mode (default: $PORT or 3000)"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def configure_logging(settings: Settings) -> None:
    """Send logs to stderr; stdout belongs to the stdio transport."""
    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the MCP server."""
    args = build_parser().parse_args(argv)

    settings = Settings.from_env()
    overrides: dict = {}
    if args.port is not None:
        overrides["port"] = args.port
    if args.debug:
        overrides["log_level"] = "debug"
        overrides["debug"] = True
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings)
    client.reload(settings)

    if args.web:
        if not settings.has_credentials:
            logger.warning(
                "Naver API credentials missing (%s); tool calls will fail or return synthetic data",
                ", ".join(settings.missing_credentials),
            )
    else:
        try:
            settings.require_credentials()
        except ConfigurationError as e:
            logger.error("Cannot start server: %s", e)
            sys.exit(1)

    try:
        if args.web:
            print(
                f"Naver Maps MCP Server starting in HTTP mode on {args.host}:{settings.port}",
                file=sys.stderr,
            )
            mcp.run(host=args.host, port=settings.port, stdio=False)
        else:
            print("Naver Maps MCP Server starting in STDIO mode", file=sys.stderr)
            mcp.run(stdio=True)
    except KeyboardInterrupt:
        logger.info("Shutting down")
    except OSError as e:
        logger.error("Failed to start transport: %s", e)
        sys.exit(1)
    except Exception:
        logger.exception("Server stopped by an unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
