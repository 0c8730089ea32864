# jsonrift/logger.py
# Console logging for the command-line entry point.
#
# Library modules only create module loggers (logging.getLogger(__name__))
# and never install handlers. get_logger() is called once by the CLI.

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO

from rich.console import Console
from rich.highlighter import NullHighlighter
from rich.markup import escape
from rich.theme import Theme

_LEVEL_COLORS = {
    logging.DEBUG:    "dim white",
    logging.INFO:     "blue",
    logging.WARNING:  "yellow",
    logging.ERROR:    "red",
    logging.CRITICAL: "bold red",
}

_LOG_THEME = Theme(
    {
        "logging.level.debug":    "dim white",
        "logging.level.info":     "blue",
        "logging.level.warning":  "yellow",
        "logging.level.error":    "red",
        "logging.level.critical": "bold red",
    }
)


class ConsoleLogHandler(logging.Handler):
    """Writes "[time] LEVEL message" lines to a rich Console, level coloured."""

    def __init__(self, level=logging.NOTSET, stream: Optional[TextIO] = None):
        super().__init__(level)
        self.console = Console(
            theme=_LOG_THEME,
            highlighter=NullHighlighter(),
            file=stream if stream is not None else sys.stderr,
            soft_wrap=True,
        )

    def emit(self, record):
        try:
            level_color = _LEVEL_COLORS.get(record.levelno, "white")
            time_str = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
            # Messages may contain JSON brackets; never interpret them as markup.
            message = escape(record.getMessage())
            self.console.print(
                f"[dim white]{time_str}[/dim white] "
                f"[{level_color}]{record.levelname}[/{level_color}] {message}",
                markup=True,
                highlight=False,
            )
        except Exception:
            self.handleError(record)


def get_logger(
    name:   str = "jsonrift",
    debug:  bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = ConsoleLogHandler(stream=stream)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger
