"""
Configuration module
Holds every application setting: remote store, server, logging and dashboard options
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings"""

    # Remote JSON store
    store_base_url: str = ""
    store_timeout: float = 10.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_file: str = "logs/app.log"
    # Console output is kept quieter than the log file
    log_console_level: str = "WARNING"

    # Calendar-day bucketing; empty means the process local zone
    timezone: str = ""

    # Dashboard
    upcoming_events_limit: int = 3
    dashboard_recent_tasks_limit: int = 4
    dashboard_active_goals_limit: int = 3

    # Sign-in tokens; an empty secret means a random one per process
    jwt_secret_key: str = ""
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # Application
    app_name: str = "Daybook"
    app_version: str = "1.0.0"
    debug: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    """
    Return the settings instance (singleton)
    lru_cache makes sure only one Settings object is built
    """
    return Settings()


settings = get_settings()
