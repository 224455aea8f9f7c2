"""Command-line interface for the user service."""

import argparse
import asyncio
import logging
from typing import Sequence

import uvicorn

from user_service.config import get_settings
from user_service.infrastructure.database import init_db
from user_service.infrastructure.observability import setup_logging

logger = logging.getLogger("user_service.cli")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="User service utilities")
    subparsers = parser.add_subparsers(dest="command")
    parser.set_defaults(command="serve", host=settings.host, port=settings.port)

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP API")
    serve_parser.add_argument(
        "--host", default=settings.host, help="Bind address for the API",
    )
    serve_parser.add_argument(
        "--port", type=int, default=settings.port, help="Port for the API",
    )

    subparsers.add_parser("init-db", help="Create the users table if missing")
    return parser.parse_args(argv)


async def _init_db() -> None:
    settings = get_settings()
    manager = init_db(settings.database_url)
    try:
        await manager.create_tables()
    finally:
        await manager.dispose()


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    if args.command == "init-db":
        asyncio.run(_init_db())
        logger.info("Database initialised")
        return 0

    uvicorn.run(
        "user_service.main:app",
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
