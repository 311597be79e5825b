"""
Pydantic-based configuration for the scanner.

Every knob can be set through a CLAPSCAN_* environment variable or a
local .env file; command-line flags override whatever is loaded here.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CLAPSCAN_", case_sensitive=False, env_file=".env")

    # Scan defaults
    default_ports: str = Field("1-1000", description="port spec used when -p is omitted")
    concurrency: int = Field(200, description="max probes in flight")
    timeout_ms: int = Field(1000, description="connect timeout per probe")

    # Logging
    log_level: str = Field("WARNING")

    # --install / --uninstall target directory, ~/bin when unset
    install_dir: Optional[str] = Field(None)

    @field_validator("concurrency", "timeout_ms")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
