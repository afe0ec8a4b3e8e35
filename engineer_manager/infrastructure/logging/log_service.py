"""Date-named, size-bounded log file sink. One instance per process, injected into consumers."""

import logging
import os
import threading
from datetime import date
from logging.handlers import RotatingFileHandler
from typing import Callable, Optional

from engineer_manager.application.exceptions import LogSinkError, NotInitializedError
from engineer_manager.config.logging import LogLineFormatter
from engineer_manager.domain.exceptions import InvalidArgumentError
from engineer_manager.domain.validators import validate_not_none, validate_required_text

DEFAULT_LOG_DIR = "logs"
LOG_FILE_FORMAT = "System-{date}.log"
MAX_LOG_SIZE_BYTES = 10 * 1024 * 1024  # 10 MiB
LOG_BACKUP_COUNT = 1

# Frames between the public call and Logger.log: initialize()/log()/log_error() -> _write()
_CALLER_STACKLEVEL = 3


class _PropagatingRotatingFileHandler(RotatingFileHandler):
    """RotatingFileHandler that re-raises write failures instead of printing them to stderr."""

    def handleError(self, record):
        raise


class _MinimumLevelFilter(logging.Filter):
    """Drops records below level unless logged with extra={"always_write": True}."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self._level = level

    def filter(self, record):
        return record.levelno >= self._level or getattr(record, "always_write", False)


class LogService:
    """
    Leveled, timestamped log lines appended to `System-<YYYY-MM-DD>.log`.
    States: uninitialized -> initialized. initialize() is idempotent; cleanup() only
    closes the sink. One re-entrant lock serializes initialization and every write.
    With echo, records also propagate to the `engineer_manager` logger hierarchy,
    where the verbose console handler shows the caller's module:function:line.
    """

    def __init__(
        self,
        max_bytes: int = MAX_LOG_SIZE_BYTES,
        backup_count: int = LOG_BACKUP_COUNT,
        level: int = logging.INFO,
        clock: Optional[Callable[[], date]] = None,
        echo: bool = False,
    ) -> None:
        self._max_bytes = max_bytes
        self._backup_count = backup_count
        self._level = level
        self._clock = clock or date.today
        self._lock = threading.RLock()
        self._initialized = False
        self._log_directory: Optional[str] = None
        self._handler: Optional[RotatingFileHandler] = None
        # Private logger: not reachable through logging.getLogger. The level filter,
        # not the logger level, decides what is written, so the startup line always passes.
        self._logger = logging.Logger(f"{__name__}.{id(self):x}", min(level, logging.INFO))
        self._logger.addFilter(_MinimumLevelFilter(level))
        self._logger.propagate = echo
        if echo:
            self._logger.parent = logging.getLogger(__name__)

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def log_directory(self) -> Optional[str]:
        """Absolute log directory, or None before initialization."""
        return self._log_directory

    @property
    def log_file_path(self) -> Optional[str]:
        if self._handler is None:
            return None
        return self._handler.baseFilename

    def current_log_file_name(self) -> str:
        """File name for today's calendar date."""
        return LOG_FILE_FORMAT.format(date=self._clock().isoformat())

    def initialize(self, directory: str) -> None:
        """
        Create directory (with parents) and open today's log file in append mode.
        Raises InvalidArgumentError for a None/blank directory, LogSinkError on OS failure.
        A second call is a no-op; the first call's directory is kept.
        """
        validate_required_text(directory, "Log directory path")
        with self._lock:
            if self._initialized:
                return

            handler = None
            try:
                log_directory = os.path.abspath(directory)
                os.makedirs(log_directory, exist_ok=True)
                path = os.path.join(log_directory, self.current_log_file_name())
                handler = _PropagatingRotatingFileHandler(
                    path,
                    mode="a",
                    maxBytes=self._max_bytes,
                    backupCount=self._backup_count,
                    encoding="utf-8",
                )
                handler.setFormatter(LogLineFormatter())
            except OSError as e:
                if handler is not None:
                    handler.close()
                raise LogSinkError(f"Failed to initialize LogService: {e}") from e

            self._logger.addHandler(handler)
            self._handler = handler
            self._log_directory = log_directory
            self._initialized = True
            try:
                self._write(logging.INFO, "LogService initialized successfully", None, always_write=True)
            except LogSinkError:
                self._logger.removeHandler(handler)
                handler.close()
                self._handler = None
                self._log_directory = None
                self._initialized = False
                raise

    def initialize_default(self) -> None:
        """Initialize with the relative `logs` directory."""
        self.initialize(DEFAULT_LOG_DIR)

    def log(self, level: int, message: str) -> None:
        """Append one record at level. Raises NotInitializedError, InvalidArgumentError, LogSinkError."""
        with self._lock:
            self._check_initialized()
            validate_not_none(message, "Log message")
            self._write(level, message, None)

    def log_error(self, message: str, error: BaseException) -> None:
        """Append one ERROR record with the exception's description and trace attached."""
        with self._lock:
            self._check_initialized()
            if message is None or error is None:
                raise InvalidArgumentError("Message and error cannot be null")
            self._write(logging.ERROR, message, error)

    def cleanup(self) -> None:
        """Flush and close the file sink. Repeatable; initialization state is kept."""
        with self._lock:
            if self._handler is None:
                return
            self._handler.flush()
            self._handler.close()

    def _check_initialized(self) -> None:
        if not self._initialized:
            raise NotInitializedError("LogService is not initialized")

    def _write(
        self,
        level: int,
        message: str,
        error: Optional[BaseException],
        always_write: bool = False,
    ) -> None:
        exc_info = None
        if error is not None:
            exc_info = (type(error), error, error.__traceback__)
        try:
            self._logger.log(
                level,
                "%s",
                message,
                exc_info=exc_info,
                extra={"always_write": always_write},
                stacklevel=_CALLER_STACKLEVEL,
            )
        except OSError as e:
            raise LogSinkError(f"Failed to write log record: {e}") from e
