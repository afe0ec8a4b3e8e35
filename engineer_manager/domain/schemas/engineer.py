"""Pydantic schemas for displaying engineer records. Strict validation, no UI toolkit."""

from datetime import date
from typing import List

from pydantic import BaseModel, Field, field_validator

COLUMN_NAMES = (
    "Employee ID",
    "Name",
    "Date of Birth",
    "Career (years)",
    "Languages",
)


class EngineerRow(BaseModel):
    """One table row. Built from a domain Engineer via model_validate (from_attributes)."""

    engineer_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    birth_date: date
    career_years: int = Field(..., ge=0)
    languages: List[str] = Field(default_factory=list)

    model_config = {"from_attributes": True, "frozen": True}

    @field_validator("languages", mode="before")
    @classmethod
    def languages_as_list(cls, v):
        """Domain stores tags as a tuple; rows expose a plain list."""
        if v is None:
            return []
        return list(v)

    def cells(self) -> List[str]:
        """Cell values in COLUMN_NAMES order."""
        return [
            self.engineer_id,
            self.name,
            self.birth_date.isoformat(),
            str(self.career_years),
            ", ".join(self.languages),
        ]
