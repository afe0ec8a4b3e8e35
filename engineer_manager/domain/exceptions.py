"""Domain-specific exceptions. Pure domain layer, no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainValidationError(DomainError):
    """Raised when domain validation rules are violated."""


class InvalidArgumentError(DomainValidationError):
    """Raised when a required argument is None, empty, or outside its documented range."""


class DuplicateRecordError(DomainValidationError):
    """Raised when a loaded record set contains the same engineer_id twice."""
