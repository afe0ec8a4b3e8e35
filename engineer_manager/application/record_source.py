"""Record source protocol. Application layer depends on this; infrastructure implements it."""

from typing import List, Protocol

from engineer_manager.domain.models.engineer import Engineer


class RecordSource(Protocol):
    """Supplies a complete, ordered record set. Each call returns a fresh list."""

    def load(self) -> List[Engineer]:
        ...
