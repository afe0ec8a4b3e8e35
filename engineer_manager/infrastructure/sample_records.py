"""Generated sample record set used by the default list view and the self-test mode."""

from datetime import date
from typing import List, Optional, Sequence

from engineer_manager.domain.models.engineer import Engineer

DEFAULT_SAMPLE_COUNT = 1000
SAMPLE_LANGUAGES = ("Java", "Python", "JavaScript")
SAMPLE_BIRTH_DATE = date(1990, 4, 1)


class SampleRecordSource:
    """IDs ID00001.., names "Taro Yamada <i>", career i % 20, fixed language list."""

    def __init__(
        self,
        count: int = DEFAULT_SAMPLE_COUNT,
        birth_date: Optional[date] = None,
        languages: Sequence[str] = SAMPLE_LANGUAGES,
        id_prefix: str = "ID",
        name_prefix: str = "Taro Yamada",
    ) -> None:
        self._count = count
        self._birth_date = birth_date or SAMPLE_BIRTH_DATE
        self._languages = tuple(languages)
        self._id_prefix = id_prefix
        self._name_prefix = name_prefix

    def load(self) -> List[Engineer]:
        return [
            Engineer(
                engineer_id=f"{self._id_prefix}{i:05d}",
                name=f"{self._name_prefix} {i}",
                birth_date=self._birth_date,
                career_years=i % 20,
                languages=self._languages,
            )
            for i in range(1, self._count + 1)
        ]
