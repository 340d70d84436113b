"""Console client entry point."""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

import logfire

from threadview.application import CommentTreeController
from threadview.config import CommentServiceSettings, Settings
from threadview.interface.console.surface import ConsoleDisplaySurface
from threadview.interface.console.session import ConsoleSession
from threadview.util.di.container import create_container
from threadview.util.logging import get_logger, setup_logging
from threadview.util.observability import configure_logfire, instrument_httpx

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="threadview",
        description="Browse and edit a threaded comment service from the terminal.",
    )
    parser.add_argument(
        "--base-url",
        help=(
            "comment service URL "
            "(default: COMMENT_SERVICE__BASE_URL or http://localhost:8080)"
        ),
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="request timeout in seconds (default: transport default)",
    )
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Apply command line overrides on top of environment settings."""
    settings = Settings()
    service_overrides = {}
    if args.base_url:
        service_overrides["base_url"] = args.base_url
    if args.timeout is not None:
        service_overrides["timeout"] = args.timeout

    updates = {}
    if service_overrides:
        # Re-validate so the URL is normalized like an environment value
        updates["comment_service"] = CommentServiceSettings.model_validate(
            {**settings.comment_service.model_dump(), **service_overrides}
        )
    if args.debug:
        updates["debug"] = True
    return settings.model_copy(update=updates) if updates else settings


async def _read_stdin_line() -> str:
    return await asyncio.to_thread(sys.stdin.readline)


async def run(settings: Settings) -> None:
    """Run one interactive session against the configured service."""
    surface = ConsoleDisplaySurface()
    container = create_container(surface, settings)
    try:
        controller = await container.get(CommentTreeController)
        surface.acknowledge(
            f"Connected to {settings.comment_service.base_url}. Type 'help' for commands."
        )
        await ConsoleSession(controller, surface, _read_stdin_line).run()
    finally:
        await container.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the console client."""
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(settings)
    logger.debug(f"Comment service: {settings.comment_service.base_url}")
    configure_logfire(settings)
    instrument_httpx()

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        logfire.error(
            "Client stopped unexpectedly",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0
