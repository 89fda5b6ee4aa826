"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "payment-scheduler"
    log_level: str = "INFO"

    # Calendar
    timezone: str = "Asia/Taipei"  # "today" for due-date and overdue checks
    reschedule_day: int = 1  # Day of the target month overdue items move to


settings = Settings()
