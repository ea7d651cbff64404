import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from newversion.version import get_app_version


class Settings(BaseSettings):
    app_store_host: str = "itunes.apple.com"
    app_store_lookup_path: str = "/lookup"
    play_store_host: str = "play.google.com"
    play_store_details_path: str = "/store/apps/details"
    http_timeout_seconds: float = 10.0
    user_agent: str = f"newversion/{get_app_version()}"
    log_level: str = "INFO"
    model_config = SettingsConfigDict(
        env_prefix="NEWVERSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str | None = None) -> None:
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
