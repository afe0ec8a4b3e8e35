"""Page of records computed from an ordered sequence. Transient, never persisted."""

from dataclasses import dataclass
from typing import Tuple

from engineer_manager.domain.models.engineer import Engineer


@dataclass(frozen=True)
class Page:
    """A fixed-size contiguous slice of the current result set. number is already clamped."""

    items: Tuple[Engineer, ...]
    number: int
    total_pages: int
    page_size: int
    total_items: int

    @property
    def label(self) -> str:
        return f"Page: {self.number} / {self.total_pages}"

    def __len__(self) -> int:
        return len(self.items)
