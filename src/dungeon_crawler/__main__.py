from __future__ import annotations

import argparse
import sys

from . import __version__
from .core.config import get_settings
from .core.exceptions import ConfigurationError
from .core.logging import configure_logging, get_logger
from .engine.session import Session
from .ui.terminal import TerminalUI


VERBOSITY_LEVELS = {1: "INFO", 2: "DEBUG"}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dungeon-crawler",
        description="Rusty Crawler - a small terminal dungeon crawler",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--name", default=None, help="Name of the player character")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between frames")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    # Honor CLI over env vars
    default_level = "DEBUG" if settings.debug else settings.log_level
    level = VERBOSITY_LEVELS.get(min(args.verbose, 2), default_level)
    configure_logging(level=level, json_format=settings.log_json, log_file=settings.log_file)
    logger = get_logger(__name__)

    ui = TerminalUI(settings)
    if args.no_clear:
        ui.clear_screen = False

    session = Session(settings, player_name=args.name)
    logger.info("Session starting", version=__version__)
    try:
        session.run(ui)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
