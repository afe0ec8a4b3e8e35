"""Domain schemas. Display rows and validation."""

from engineer_manager.domain.schemas.engineer import COLUMN_NAMES, EngineerRow

__all__ = [
    "COLUMN_NAMES",
    "EngineerRow",
]
