"""Domain model for engineer records. Pure business semantics, no UI or storage."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Tuple


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Engineer:
    """
    One person's personnel entry. Immutable; a reload replaces the whole collection.
    registered_at is stamped once at creation and excluded from equality.
    """

    engineer_id: str
    name: str
    birth_date: date
    career_years: int
    languages: Tuple[str, ...] = ()
    registered_at: datetime = field(default_factory=_utc_now, compare=False)

    def __post_init__(self) -> None:
        # Accept any iterable of tags but always store a tuple
        if not isinstance(self.languages, tuple):
            object.__setattr__(self, "languages", tuple(self.languages))

    def matches(self, needle: str) -> bool:
        """True if needle (already lower-cased) occurs in the id or the name."""
        return needle in self.engineer_id.lower() or needle in self.name.lower()
