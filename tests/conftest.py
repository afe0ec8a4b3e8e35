"""Shared fixtures: 1000 engineer records, an initialized LogService in tmp_path, test settings."""

from datetime import date

import pytest

from engineer_manager.config.settings import AppSettings
from engineer_manager.domain.models.engineer import Engineer
from engineer_manager.infrastructure.logging.log_service import LogService

FIXED_TODAY = date(2025, 2, 10)


@pytest.fixture
def engineers_1000():
    return [
        Engineer(
            engineer_id=f"ID{i:05d}",
            name=f"Taro Yamada {i}",
            birth_date=date(1990, 4, 1),
            career_years=i % 20,
            languages=("Java", "Python", "JavaScript"),
        )
        for i in range(1, 1001)
    ]


@pytest.fixture
def log_dir(tmp_path):
    return tmp_path / "logs"


@pytest.fixture
def log_service():
    service = LogService(clock=lambda: FIXED_TODAY)
    yield service
    service.cleanup()


@pytest.fixture
def initialized_log_service(log_service, log_dir):
    log_service.initialize(str(log_dir))
    return log_service


@pytest.fixture
def log_file(log_dir):
    return log_dir / "System-2025-02-10.log"


@pytest.fixture
def settings(log_dir):
    return AppSettings(log_dir=str(log_dir), sample_record_count=250)
