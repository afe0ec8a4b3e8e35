"""Diagnostics: built-in self-test mode."""

from engineer_manager.diagnostics.self_test import (
    SelfTestResult,
    render_report,
    run_all_checks,
)

__all__ = [
    "SelfTestResult",
    "render_report",
    "run_all_checks",
]
