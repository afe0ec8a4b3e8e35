"""Dialog application service. Validates messages and logs errors; presentation is injected."""

import logging
from typing import Optional, Protocol

from engineer_manager.application.log_sink import LogSink
from engineer_manager.domain.validators import validate_required_text

ERROR_TITLE = "Error"
CONFIRM_TITLE = "Confirm"
COMPLETE_TITLE = "Complete"


class DialogPresenter(Protocol):
    """Shows modal dialogs. Implemented by the UI shell (console, toolkit, or test double)."""

    def show_error(self, title: str, message: str) -> None: ...
    def ask_confirmation(self, title: str, message: str) -> bool: ...
    def show_information(self, title: str, message: str) -> None: ...


class DialogService:
    """
    Error, confirmation, and completion dialogs with uniform titles.
    Every message must be non-blank; error dialogs are also written to the log sink.
    """

    def __init__(self, presenter: DialogPresenter, log_sink: Optional[LogSink] = None) -> None:
        self._presenter = presenter
        self._log_sink = log_sink

    def show_error(self, message: str) -> None:
        validate_required_text(message, "Message")
        if self._log_sink is not None:
            self._log_sink.log(logging.ERROR, message)
        self._presenter.show_error(ERROR_TITLE, message)

    def show_confirm(self, message: str) -> bool:
        """True only if the user answered yes."""
        validate_required_text(message, "Message")
        return bool(self._presenter.ask_confirmation(CONFIRM_TITLE, message))

    def show_completion(self, message: str) -> None:
        validate_required_text(message, "Message")
        self._presenter.show_information(COMPLETE_TITLE, message)
