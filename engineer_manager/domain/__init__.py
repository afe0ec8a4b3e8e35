"""Domain layer: models, schemas, validators, exceptions. Pure business logic only."""

from engineer_manager.domain.exceptions import (
    DomainError,
    DomainValidationError,
    DuplicateRecordError,
    InvalidArgumentError,
)
from engineer_manager.domain.models import Engineer, Page
from engineer_manager.domain.schemas import COLUMN_NAMES, EngineerRow
from engineer_manager.domain.validators import (
    validate_engineer,
    validate_not_none,
    validate_page_size,
    validate_required_text,
    validate_unique_ids,
)

__all__ = [
    "COLUMN_NAMES",
    "DomainError",
    "DomainValidationError",
    "DuplicateRecordError",
    "Engineer",
    "EngineerRow",
    "InvalidArgumentError",
    "Page",
    "validate_engineer",
    "validate_not_none",
    "validate_page_size",
    "validate_required_text",
    "validate_unique_ids",
]
