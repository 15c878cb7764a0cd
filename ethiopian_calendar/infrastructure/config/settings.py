"""Application settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application configuration settings."""

    ethiopia_timezone: str = "Africa/Addis_Ababa"
    clock_backend: str = "system"  # system or fixed
    fixed_clock_time: str = ""  # ISO-8601, required when clock_backend=fixed
    default_daily_fee_rate: float = 10.0
    default_frequency_months: int = 1
    default_payment_count: int = 12
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name and reject unknown levels."""
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level


settings = Settings()
