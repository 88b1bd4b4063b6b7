from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CB_", env_file=".env", extra="ignore")

    service_name: str = "charblocks-service"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Unset means the built-in table.
    block_table_path: str | None = None
    max_text_chars: int = 1_000_000
    percent_precision: int = 2


settings = Settings()
