from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables (or a local .env)."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    DATABASE_URL: str = "sqlite:///./employee_management.db"
    BACKEND_CORS_ORIGINS: List[str] = []

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # no migrations, tables are created on startup
    AUTO_CREATE_TABLES: bool = True


settings = Settings()
