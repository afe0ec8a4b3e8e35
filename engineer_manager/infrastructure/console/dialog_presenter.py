"""Console implementation of DialogPresenter. Reads answers from an injected input function."""

import sys
from typing import Callable, Optional, TextIO

YES_ANSWERS = ("y", "yes")


class ConsoleDialogPresenter:
    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._input = input_func
        self._stream = stream or sys.stdout

    def _box(self, title: str, message: str) -> None:
        self._stream.write(f"--- {title} ---\n{message}\n")
        self._stream.flush()

    def show_error(self, title: str, message: str) -> None:
        self._box(title, message)

    def ask_confirmation(self, title: str, message: str) -> bool:
        self._box(title, message)
        try:
            answer = self._input("[y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in YES_ANSWERS

    def show_information(self, title: str, message: str) -> None:
        self._box(title, message)
