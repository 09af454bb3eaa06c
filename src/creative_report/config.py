# src/creative_report/config.py
import logging
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from creative_report.exceptions import ConfigError


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # JetBrains Space
    space_domain: str
    space_project_id: str
    space_token: str
    space_user_id: str

    # Document
    user_name: str
    percent_creative: int

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(env_file: str | None = ".env") -> Settings:
    """Build settings from the environment and an optional dotenv file."""
    try:
        return Settings(_env_file=env_file)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            name = ".".join(str(part) for part in error["loc"]).upper()
            if error["type"] == "missing":
                problems.append(f"Missing {name} in env")
            else:
                problems.append(f"Invalid {name}: {error['msg']}")
        raise ConfigError("; ".join(problems)) from e
