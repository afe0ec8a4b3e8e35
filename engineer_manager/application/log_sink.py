"""Log sink protocol. Application layer depends on this; infrastructure implements it."""

from typing import Protocol


class LogSink(Protocol):
    """Leveled log writer injected into services. Levels are stdlib logging integers."""

    def log(self, level: int, message: str) -> None:
        """Append one record at level."""
        ...

    def log_error(self, message: str, error: BaseException) -> None:
        """Append one error record with the exception trace attached."""
        ...
