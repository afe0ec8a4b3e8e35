# engineer_manager/config/logging.py

import logging
from datetime import datetime

LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "engineer_manager"
CONSOLE_HANDLER_NAME = "engineer_manager.console"


class LogLineFormatter(logging.Formatter):
    """
    Renders `[YYYY-MM-DD HH:MM:SS] [LEVEL] message`. An attached exception follows on
    continuation lines, each indented with a tab; chained causes are included.
    With show_origin, the caller's module:function:line is inserted before the message.
    """

    def __init__(self, show_origin: bool = False) -> None:
        super().__init__()
        self._show_origin = show_origin

    def formatTime(self, record, datefmt=None):
        return datetime.fromtimestamp(record.created).strftime(datefmt or LOG_DATE_FORMAT)

    def format(self, record):
        line = f"[{self.formatTime(record)}] [{record.levelname}] "
        if self._show_origin:
            line += f"{record.module}:{record.funcName}:{record.lineno} "
        line += record.getMessage()
        if record.exc_info:
            trace = self.formatException(record.exc_info)
            line += "\n" + "\n".join("\t" + part for part in trace.splitlines())
        return line


def configure_logging(log_level: str, verbose: bool = False) -> logging.Logger:
    """Attach a console handler to the package logger. Safe to call more than once."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.DEBUG if verbose else log_level
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(LogLineFormatter(show_origin=verbose))
    handler.set_name(CONSOLE_HANDLER_NAME)
    logger.addHandler(handler)
    return logger
