"""Validators for record and argument rules. Pure functions, no infrastructure or file access."""

from typing import Any, Iterable

from engineer_manager.domain.exceptions import DuplicateRecordError, InvalidArgumentError
from engineer_manager.domain.models.engineer import Engineer


def validate_required_text(value: Any, field_name: str) -> None:
    """Reject None, empty, and whitespace-only strings. Raises InvalidArgumentError."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{field_name} cannot be null or empty")


def validate_not_none(value: Any, field_name: str) -> None:
    """Reject None only; empty strings are allowed (log messages)."""
    if value is None:
        raise InvalidArgumentError(f"{field_name} cannot be null")


def validate_page_size(page_size: int) -> None:
    """Page size must be a positive integer."""
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise InvalidArgumentError(f"page_size must be a positive integer, got {page_size!r}")


def validate_engineer(engineer: Engineer) -> None:
    """Enforce record invariants: id and name present, career non-negative."""
    validate_required_text(engineer.engineer_id, "engineer_id")
    validate_required_text(engineer.name, "name")
    if engineer.birth_date is None:
        raise InvalidArgumentError("birth_date is required")
    if engineer.career_years < 0:
        raise InvalidArgumentError(
            f"career_years must be >= 0, got {engineer.career_years}"
        )


def validate_unique_ids(engineers: Iterable[Engineer]) -> None:
    """Identifiers must be unique within one loaded set. Raises DuplicateRecordError."""
    seen = set()
    for engineer in engineers:
        if engineer.engineer_id in seen:
            raise DuplicateRecordError(f"Duplicate engineer_id: {engineer.engineer_id}")
        seen.add(engineer.engineer_id)
