# Application layer: services that orchestrate domain rules and injected collaborators.

from engineer_manager.application.dialog_service import DialogPresenter, DialogService
from engineer_manager.application.exceptions import (
    ApplicationError,
    LogSinkError,
    NotInitializedError,
)
from engineer_manager.application.log_sink import LogSink
from engineer_manager.application.record_list_service import RecordListService
from engineer_manager.application.record_source import RecordSource

__all__ = [
    "ApplicationError",
    "DialogPresenter",
    "DialogService",
    "LogSink",
    "LogSinkError",
    "NotInitializedError",
    "RecordListService",
    "RecordSource",
]
