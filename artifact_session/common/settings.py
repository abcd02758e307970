from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Identity reported in the user agent
    product_name: str = "artifact-session"
    product_version: Optional[str] = None  # overrides the installed distribution version

    # Logging
    log_level: str = "INFO"
    log_dir: str = "/var/log/artifact-session"
    file_logging: bool = False

    model_config = SettingsConfigDict(
        env_prefix="ARTIFACT_SESSION_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
