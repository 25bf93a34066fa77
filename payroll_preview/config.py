from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    env: str = Field(default="dev", description="Deployment environment")
    app_name: str = "Payroll Preview"
    timezone: str = Field(
        default="UTC",
        validation_alias=AliasChoices("APP_TIMEZONE", "PAYROLL_TIMEZONE"),
        description="IANA timezone label passed to the month resolver",
    )
    log_level: str = "INFO"
    log_format: str = Field(default="json", description="json or console")

    model_config = SettingsConfigDict(env_prefix="PAYROLL_", extra="ignore", populate_by_name=True)

    @field_validator("timezone", mode="before")
    @classmethod
    def default_timezone(cls, value: str | None) -> str:
        if value is None or not str(value).strip():
            return "UTC"
        return str(value).strip()

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return value


@lru_cache
def get_settings() -> Settings:
    env = Settings(_env_file=None).env
    return Settings(_env_file=get_settings_env_file(env))


def get_settings_env_file(env: str) -> str | None:
    """Resolve environment-specific env file if it exists."""
    env_file = BASE_DIR / f".env.{env}"
    default_file = BASE_DIR / ".env"
    if env_file.exists():
        return str(env_file)
    if default_file.exists():
        return str(default_file)
    return None
