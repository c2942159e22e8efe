"""Serve the bookshelf API with uvicorn.

Usage:
    python -m scripts.serve [--host HOST] [--port PORT] [--reload]

Defaults come from the environment (``PORT``, ``HOST``, ``LOG_LEVEL``,
``RELOAD``), optionally loaded from ``backend/.env``.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import uvicorn
from dotenv import load_dotenv

from settings import Settings

ENV_PATH = Path(__file__).resolve().parents[1] / ".env"

LOG = logging.getLogger("bookshelf")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the bookshelf HTTP API.")
    parser.add_argument("--host", default=settings.HOST, help="Interface to bind.")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on.")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level name.")
    parser.add_argument(
        "--reload",
        action="store_true",
        default=settings.RELOAD,
        help="Restart the server when source files change.",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main(argv: Optional[list[str]] = None) -> int:
    load_dotenv(ENV_PATH)
    settings = Settings()
    args = build_parser(settings).parse_args(argv)

    configure_logging(args.log_level)
    LOG.info("Listening on %s:%d", args.host, args.port)
    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
