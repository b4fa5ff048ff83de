"""
Configuration settings for the Monkey Explorer.

Uses Pydantic Settings to load environment variables for the dataset location
and logging. The expected integrity digest is not a setting: it
lives in `monkey_explorer.store.integrity` and ships with the code.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_FILE = Path(__file__).resolve().parent / "data" / "monkeys.json"


class Settings(BaseSettings):
    # Dataset
    data_file: Path = Field(DEFAULT_DATA_FILE, alias="EXPLORER_DATA_FILE")

    # Logging
    log_level: str = Field("WARNING", alias="EXPLORER_LOG_LEVEL")
    json_logs: bool = Field(False, alias="EXPLORER_JSON_LOGS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_DATA_FILE", "Settings", "get_settings"]
