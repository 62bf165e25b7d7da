from __future__ import annotations

from typing import Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"
    max_upload_bytes: int = 1024 * 1024
    allowed_extensions: Tuple[str, ...] = (".json",)

    model_config = SettingsConfigDict(
        env_prefix="LOCALIZER_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
