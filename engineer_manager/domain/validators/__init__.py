"""Domain validators. Pure validation functions."""

from engineer_manager.domain.validators.engineer_validator import (
    validate_engineer,
    validate_not_none,
    validate_page_size,
    validate_required_text,
    validate_unique_ids,
)

__all__ = [
    "validate_engineer",
    "validate_not_none",
    "validate_page_size",
    "validate_required_text",
    "validate_unique_ids",
]
