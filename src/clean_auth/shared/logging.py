"""Logging setup."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from clean_auth.shared.config.settings import LoggingSettings


def setup_logging(settings: LoggingSettings | None = None) -> None:
    """Configure the root logger from settings.

    Uses a rich handler on stderr when colored output is enabled, a plain
    stream handler otherwise.
    """
    settings = settings or LoggingSettings()

    if settings.console_colored:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.format))

    logging.basicConfig(
        level=settings.level.upper(),
        handlers=[handler],
        force=True,
    )
