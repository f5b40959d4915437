import logging
from typing import Any

RESET = "\x1b[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\u001b[34m",
    logging.INFO: "\u001b[32m",
    logging.WARNING: "\x1b[33;20m",
    logging.ERROR: "\x1b[31;20m",
    logging.CRITICAL: "\x1b[31;1m",
}


def level_format(levelno: int, with_location: bool) -> str:
    color = LEVEL_COLORS.get(levelno, "")
    fmt = f"{color}%(levelname)s{RESET}: %(name)s: %(message)s"
    if with_location:
        fmt += "\n        %(pathname)s:%(lineno)d::%(funcName)s"
    return fmt


class ColorFormatter(logging.Formatter):
    def __init__(self, log_locations: bool = False) -> None:
        super().__init__()
        self.log_locations = log_locations
        self._formatters: dict[int, logging.Formatter] = {}

    def format(self, record: logging.LogRecord) -> str:
        formatter = self._formatters.get(record.levelno)
        if formatter is None:
            formatter = logging.Formatter(
                level_format(record.levelno, self.log_locations)
            )
            self._formatters[record.levelno] = formatter
        return formatter.format(record)


def setup_logging(level: Any, root_log_name: str = __name__.split(".")[0]) -> None:
    logger = logging.getLogger(root_log_name)
    logger.setLevel(level)

    # importing twice must not stack handlers
    for handler in logger.handlers:
        if isinstance(handler.formatter, ColorFormatter):
            handler.setLevel(level)
            return

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        ColorFormatter(logging.getLevelName(level) in (logging.DEBUG, "DEBUG"))
    )
    logger.addHandler(handler)
