"""Domain models. Pure business entities."""

from engineer_manager.domain.models.engineer import Engineer
from engineer_manager.domain.models.page import Page

__all__ = [
    "Engineer",
    "Page",
]
