# engineer_manager/config/settings.py

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ENGINEER_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "engineer-manager"
    version: str = "0.1.0"

    # --- Log file sink ---
    log_dir: str = Field("logs", min_length=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_max_bytes: int = Field(10 * 1024 * 1024, gt=0)  # 10 MiB
    log_backup_count: int = Field(1, ge=0)

    # --- Record list ---
    page_size: int = Field(100, gt=0)
    sample_record_count: int = Field(1000, ge=0)


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
