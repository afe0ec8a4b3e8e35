"""Application-layer exceptions. Do not reuse domain exceptions."""


class ApplicationError(Exception):
    """Base for all application-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotInitializedError(ApplicationError):
    """Raised when an operation requiring prior setup runs before that setup completed."""


class LogSinkError(ApplicationError):
    """Raised when the log directory or file sink fails at the OS level. Original OSError is chained."""
