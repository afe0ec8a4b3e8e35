"""Console list view: table rendering and the paging/search command loop."""

import sys
from typing import Callable, List, Optional, TextIO

from engineer_manager.application.dialog_service import DialogService
from engineer_manager.application.record_list_service import RecordListService
from engineer_manager.domain.models.page import Page
from engineer_manager.domain.schemas.engineer import COLUMN_NAMES, EngineerRow

HELP_TEXT = "Commands: n=next  p=previous  s <text>=search  r=refresh  q=quit"
QUIT_PROMPT = "Quit the application?"


def render_page(page: Page) -> str:
    """Header, one line per row, then the page label. Columns are padded to their widest cell."""
    rows: List[List[str]] = [
        EngineerRow.model_validate(engineer).cells() for engineer in page.items
    ]
    widths = [len(name) for name in COLUMN_NAMES]
    for cells in rows:
        widths = [max(w, len(c)) for w, c in zip(widths, cells)]

    def _line(cells) -> str:
        return " | ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    lines = [_line(COLUMN_NAMES), "-+-".join("-" * w for w in widths)]
    lines.extend(_line(cells) for cells in rows)
    lines.append(page.label)
    return "\n".join(lines)


class ConsoleListView:
    """
    Interactive shell over RecordListService. One command per input line.
    Returns from run() on quit (after confirmation) or end of input.
    """

    def __init__(
        self,
        record_service: RecordListService,
        dialog_service: DialogService,
        input_func: Callable[[str], str] = input,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._records = record_service
        self._dialogs = dialog_service
        self._input = input_func
        self._stream = stream or sys.stdout

    def show(self, page: Page) -> None:
        self._stream.write(render_page(page) + "\n")
        self._stream.flush()

    def handle(self, command: str) -> bool:
        """Run one command. False means the loop should stop."""
        name, _, argument = command.strip().partition(" ")
        name = name.lower()
        if name == "q":
            return not self._dialogs.show_confirm(QUIT_PROMPT)
        if name == "n":
            self.show(self._records.next_page())
        elif name == "p":
            self.show(self._records.previous_page())
        elif name == "s":
            self._records.search(argument)
            self.show(self._records.current_view())
        elif name == "r":
            self.show(self._records.current_view())
        elif name in ("h", "?"):
            self._stream.write(HELP_TEXT + "\n")
        else:
            self._dialogs.show_error(f"Unknown command: {command.strip() or '<empty>'}")
        return True

    def run(self) -> None:
        self._stream.write(HELP_TEXT + "\n")
        self.show(self._records.current_view())
        while True:
            try:
                command = self._input("> ")
            except EOFError:
                return
            if not self.handle(command):
                return
