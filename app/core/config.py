import logging
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "EduPlatform"
    database_url: str = "sqlite:///./app.db"
    secret_key: str = "change-me"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    files_dir: str = "uploads"
    files_base_url: str = ""
    max_upload_mb: int = 10
    signed_url_expire_seconds: int = 3600

    resend_api_key: Optional[str] = None
    resend_api_url: str = "https://api.resend.com/emails"
    mail_from: str = "EduPlatform <onboarding@resend.dev>"
    mail_timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
