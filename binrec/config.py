"""
Configuration settings for binrec.

Uses Pydantic Settings to load environment variables for the data file
location, the in-memory update rule, and logging.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from binrec.domain.models import check_score


class Settings(BaseSettings):
    # Storage
    data_file: Path = Field(Path("data.bin"), alias="BINREC_DATA_FILE")
    record_count: int = Field(4, ge=0, alias="BINREC_RECORD_COUNT")

    # Update rule applied while reading
    match_id: int = Field(2, alias="BINREC_MATCH_ID")
    override_score: float = Field(100.0, alias="BINREC_OVERRIDE_SCORE")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("override_score")
    @classmethod
    def _storable_score(cls, value: float) -> float:
        return check_score(value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
