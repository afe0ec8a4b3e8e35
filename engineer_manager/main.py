# engineer_manager/main.py

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

from engineer_manager.application.dialog_service import DialogPresenter, DialogService
from engineer_manager.application.exceptions import ApplicationError
from engineer_manager.application.record_list_service import RecordListService
from engineer_manager.application.record_source import RecordSource
from engineer_manager.config.logging import configure_logging
from engineer_manager.config.settings import AppSettings, get_settings
from engineer_manager.diagnostics.self_test import render_report, run_all_checks
from engineer_manager.domain.exceptions import DomainError
from engineer_manager.infrastructure.console.dialog_presenter import ConsoleDialogPresenter
from engineer_manager.infrastructure.console.list_view import ConsoleListView
from engineer_manager.infrastructure.logging.log_service import LogService
from engineer_manager.infrastructure.sample_records import SampleRecordSource

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_SELF_TEST_ERROR = 2


@dataclass
class AppContainer:
    """Composition root: the one place services are constructed and wired together."""

    settings: AppSettings
    log_service: LogService
    dialog_service: DialogService
    record_service: RecordListService
    record_source: RecordSource


def build_container(
    settings: AppSettings,
    presenter: Optional[DialogPresenter] = None,
    record_source: Optional[RecordSource] = None,
    verbose: bool = False,
) -> AppContainer:
    """Wire log, dialog and record list services. The log service is not initialized here."""
    log_service = LogService(
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        level=logging.DEBUG if verbose else getattr(logging, settings.log_level),
        echo=verbose,
    )
    dialog_service = DialogService(presenter or ConsoleDialogPresenter(), log_sink=log_service)
    record_service = RecordListService(page_size=settings.page_size, log_sink=log_service)
    return AppContainer(
        settings=settings,
        log_service=log_service,
        dialog_service=dialog_service,
        record_service=record_service,
        record_source=record_source or SampleRecordSource(count=settings.sample_record_count),
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """--test selects self-test mode, --verbose enables debug output. Unknown args land in .ignored."""
    parser = argparse.ArgumentParser(
        prog="engineer-manager",
        description="Engineer record management.",
    )
    parser.add_argument("--test", action="store_true", help="run the built-in self-test and exit")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args, unknown = parser.parse_known_args(argv)
    args.ignored = unknown
    return args


def run_self_test(container: AppContainer) -> int:
    """0 if every check passed, 1 if any failed, 2 if the run itself broke."""
    container.log_service.log(logging.INFO, "Starting in self-test mode")
    try:
        results = run_all_checks(container.log_service, container.settings)
        print(render_report(results))
    except Exception as e:
        container.log_service.log_error("Self-test run failed", e)
        return EXIT_SELF_TEST_ERROR
    return EXIT_OK if all(r.success for r in results) else EXIT_FAILURE


def run_application(
    container: AppContainer,
    input_func: Callable[[str], str] = input,
) -> int:
    try:
        container.record_service.load(container.record_source.load())
        view = ConsoleListView(
            container.record_service,
            container.dialog_service,
            input_func=input_func,
        )
        container.log_service.log(logging.INFO, "Application started")
        view.run()
    except (DomainError, ApplicationError) as e:
        container.log_service.log_error("Application failed", e)
        return EXIT_FAILURE
    container.log_service.log(logging.INFO, "Application stopped")
    return EXIT_OK


def main(
    argv: Optional[List[str]] = None,
    settings: Optional[AppSettings] = None,
    presenter: Optional[DialogPresenter] = None,
    input_func: Callable[[str], str] = input,
) -> int:
    args = parse_args(argv)
    settings = settings or get_settings()
    configure_logging(settings.log_level, verbose=args.verbose)
    for arg in args.ignored:
        logger.warning("Ignoring unknown argument: %s", arg)

    container = build_container(settings, presenter=presenter, verbose=args.verbose)
    try:
        container.log_service.initialize(settings.log_dir)
    except (DomainError, ApplicationError) as e:
        print(f"Failed to start application: {e.message}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        if args.verbose:
            container.log_service.log(logging.DEBUG, "Verbose logging enabled")
        if args.test:
            return run_self_test(container)
        return run_application(container, input_func=input_func)
    finally:
        container.log_service.cleanup()


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
