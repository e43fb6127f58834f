import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Clinic application settings.
    Loaded from environment variables and an optional .env file.
    """

    PROJECT_NAME: str = "Hospital Management System"

    # Logging
    LOG_LEVEL: str = Field("WARNING", description="Root log level for the console application")
    LOG_FORMAT: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format passed to logging.basicConfig",
    )

    # Start-up data
    SEED_SAMPLE_DATA: bool = Field(True, description="Preload sample doctors, patients, an appointment and a bill")

    # Display and input
    DATE_FORMAT: str = Field("%Y-%m-%d", description="Format used to parse dates typed by the operator")
    CURRENCY_SYMBOL: str = Field("$", description="Symbol shown in front of bill amounts")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v!r}")
        return level


# Settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return the cached settings instance.
    Environment variables are read only once per process.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
