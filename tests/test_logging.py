from __future__ import annotations

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from polymer_lint.logging import LOGGER_NAME
from polymer_lint.logging import LogConfig
from polymer_lint.logging import configure_logging


def test_configure_logging_replaces_handlers() -> None:
    configure_logging()
    logger = configure_logging(LogConfig(level=logging.DEBUG))

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)


def test_module_loggers_propagate_to_package_logger() -> None:
    output = io.StringIO()
    console = Console(file=output, no_color=True, width=200)
    configure_logging(LogConfig(level=logging.WARNING), console=console)

    logging.getLogger("polymer_lint.linting.engine").warning("Could not lint %s", "a.html")
    logging.getLogger("polymer_lint.linting.engine").debug("Linting %s", "a.html")

    text = output.getvalue()
    assert "Could not lint a.html" in text
    assert "Linting a.html" not in text
