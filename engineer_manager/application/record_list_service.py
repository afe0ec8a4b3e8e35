"""Record list application service: in-memory record set, substring search, clamped paging."""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from engineer_manager.application.log_sink import LogSink
from engineer_manager.domain.models.engineer import Engineer
from engineer_manager.domain.models.page import Page
from engineer_manager.domain.validators import (
    validate_engineer,
    validate_page_size,
    validate_unique_ids,
)

DEFAULT_PAGE_SIZE = 100


def total_pages(count: int, page_size: int) -> int:
    """ceil(count / page_size); an empty sequence still has one (empty) page."""
    validate_page_size(page_size)
    return max(1, -(-count // page_size))


def clamp_page(number: int, count: int, page_size: int) -> int:
    """Clamp a 1-based page number into [1, total_pages]."""
    return max(1, min(number, total_pages(count, page_size)))


def paginate(sequence: Sequence[Engineer], number: int, page_size: int) -> Page:
    """Slice [(n-1)*P, min(n*P, N)) for the clamped page n. Never fails on an out-of-range number."""
    count = len(sequence)
    pages = total_pages(count, page_size)
    clamped = max(1, min(number, pages))
    start = (clamped - 1) * page_size
    return Page(
        items=tuple(sequence[start:start + page_size]),
        number=clamped,
        total_pages=pages,
        page_size=page_size,
        total_items=count,
    )


def filter_records(records: Iterable[Engineer], text: Optional[str]) -> List[Engineer]:
    """
    Case-insensitive substring match on engineer_id and name only.
    None/blank text means no filter. Original relative order is preserved.
    """
    records = list(records)
    if text is None or not text.strip():
        return records
    needle = text.lower()
    return [engineer for engineer in records if engineer.matches(needle)]


class RecordListService:
    """
    Holds one ordered record collection and derives two transient views from it:
    the current search result and the current page. Single UI thread only.
    """

    def __init__(
        self,
        page_size: int = DEFAULT_PAGE_SIZE,
        log_sink: Optional[LogSink] = None,
    ) -> None:
        validate_page_size(page_size)
        self._page_size = page_size
        self._log_sink = log_sink
        self._records: Tuple[Engineer, ...] = ()
        self._results: Tuple[Engineer, ...] = ()
        self._search_text = ""
        self._current_page = 1

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def records(self) -> Tuple[Engineer, ...]:
        return self._records

    @property
    def results(self) -> Tuple[Engineer, ...]:
        """Active result set: the full collection, or the last search result."""
        return self._results

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def current_page(self) -> int:
        return self._current_page

    def load(self, records: Iterable[Engineer]) -> None:
        """Replace the collection wholesale. Resets page to 1 and clears the filter."""
        loaded = tuple(records)
        for engineer in loaded:
            validate_engineer(engineer)
        validate_unique_ids(loaded)
        self._records = loaded
        self._results = loaded
        self._search_text = ""
        self._current_page = 1
        self._log(logging.INFO, f"Loaded {len(loaded)} engineer records")

    def search(self, text: Optional[str]) -> List[Engineer]:
        """Filter by id/name substring and make the result active. Underlying collection is untouched."""
        matched = filter_records(self._records, text)
        self._results = tuple(matched)
        self._search_text = text if text and text.strip() else ""
        self._current_page = 1
        self._log(
            logging.INFO,
            f"Search '{self._search_text}' matched {len(matched)} of {len(self._records)} records",
        )
        return matched

    def page(self, number: int, page_size: Optional[int] = None) -> Page:
        """Page of the active result set. Out-of-range numbers clamp to the nearest valid page."""
        return paginate(self._results, number, self._page_size if page_size is None else page_size)

    def total_pages(self) -> int:
        return total_pages(len(self._results), self._page_size)

    def current_view(self) -> Page:
        return self.page(self._current_page)

    def next_page(self) -> Page:
        return self._change_page(1)

    def previous_page(self) -> Page:
        return self._change_page(-1)

    def _change_page(self, delta: int) -> Page:
        self._current_page = clamp_page(
            self._current_page + delta, len(self._results), self._page_size
        )
        return self.current_view()

    def _log(self, level: int, message: str) -> None:
        if self._log_sink is not None:
            self._log_sink.log(level, message)
