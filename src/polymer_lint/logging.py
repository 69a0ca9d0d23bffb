from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "polymer_lint"


@dataclass
class LogConfig:
    level: int = logging.WARNING
    show_time: bool = False
    format: str = "%(message)s"


def configure_logging(
    config: LogConfig | None = None, console: Console | None = None
) -> logging.Logger:
    if config is None:
        config = LogConfig()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.level)

    # Clear any existing handlers
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_time=config.show_time,
        show_path=False,
    )
    handler.setLevel(config.level)
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)

    return logger
