"""Command-line entry point: start the pack calculator HTTP server.

Usage:
    python -m pack_calculator --port 8080 --pack-sizes 250,500,1000
"""

from typing import List, Optional
import argparse
import logging
import sys

import uvicorn

from .api import create_app
from .config import AppConfig, VALID_LOG_LEVELS, configure_logging, parse_pack_sizes

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pack-calculator",
        description="Serve the pack calculator HTTP API",
    )
    parser.add_argument("--host", help="Interface to bind (env: HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (env: PORT)")
    parser.add_argument(
        "--log-level",
        choices=[level.lower() for level in VALID_LOG_LEVELS],
        help="Logging level (env: LOG_LEVEL)",
    )
    parser.add_argument(
        "--pack-sizes",
        help="Comma separated default pack sizes (env: PACK_SIZES)",
    )
    return parser


def load_config(argv: Optional[List[str]] = None) -> AppConfig:
    """Merge environment configuration with command-line overrides."""
    args = build_parser().parse_args(argv)
    config = AppConfig.from_env()

    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.pack_sizes:
        overrides["default_pack_sizes"] = parse_pack_sizes(args.pack_sizes)

    if not overrides:
        return config

    return AppConfig(
        host=overrides.get("host", config.host),
        port=overrides.get("port", config.port),
        log_level=overrides.get("log_level", config.log_level),
        default_pack_sizes=overrides.get("default_pack_sizes", config.default_pack_sizes),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Start the server."""
    try:
        config = load_config(argv)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)
    app = create_app(config)

    logger.info(f"Starting Pack Calculator API on http://{config.host}:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
