import argparse
import logging
import sys

from .config import NWS_API_BASE, REQUEST_TIMEOUT, USER_AGENT, WeatherContext
from .logging_config import setup_logging
from .server import WeatherServer, create_server

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="give a model the ability to get weather alerts and forecasts from the NWS API"
    )
    parser.add_argument("--base-url", default=NWS_API_BASE, help="NWS API origin")
    parser.add_argument("--user-agent", default=USER_AGENT, help="User-Agent sent upstream")
    parser.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT,
                        help="seconds to wait for each upstream request")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def context_from_args(args: argparse.Namespace) -> WeatherContext:
    return WeatherContext(base_url=args.base_url, user_agent=args.user_agent, timeout=args.timeout)


def main(argv=None):
    """Weather MCP Server - NWS alerts and forecasts over stdio"""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        mcp = create_server(context_from_args(args))
        logger.info("Weather MCP Server running on stdio...")
        mcp.run(transport="stdio", show_banner=False)
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


__all__ = ["WeatherContext", "WeatherServer", "build_parser", "context_from_args", "create_server", "main"]
