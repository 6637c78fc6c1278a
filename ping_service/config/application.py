import logging
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class AppSettings(BaseSettings):
    name: str = "Ping Service"
    version: str = "0.1.0"
    docs_url: str = "/docs"
    root_path: str = ""

    debug: bool = False

    log_level: str = "INFO"
    log_format: Literal["verbose", "json"] = "verbose"

    @field_validator("version", mode="before")
    def version_validator(cls, value: Optional[str]) -> str:
        return value or "0.1.0"

    @field_validator("log_level", mode="before")
    def log_level_validator(cls, value: str | int) -> str:
        if isinstance(value, int):
            value = logging.getLevelName(value)
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level

    model_config = SettingsConfigDict(env_prefix="app_")
