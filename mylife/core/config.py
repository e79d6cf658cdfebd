"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "MyLife API"
    debug: bool = False
    log_level: str = "INFO"

    # Database (any SQLAlchemy async URL)
    database_url: str = "sqlite+aiosqlite:///./mylife.db"
    create_tables_on_startup: bool = True

    # JWT bearer tokens
    secret_key: str = "change-me-in-production-use-env"
    algorithm: str = "HS256"
    access_token_expire_days: int = 30

    # CORS
    cors_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
