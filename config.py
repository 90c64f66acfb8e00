# config.py
import os
import logging
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, ValidationError, field_validator

logger = logging.getLogger("fr24.mcp.config")

# Field name -> environment variable it is read from
ENV_VARS = {
    "api_url": "FR24_API_URL",
    "api_key": "FR24_API_KEY",
    "timeout": "FR24_TIMEOUT",
    "log_level": "LOG_LEVEL",
}

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(RuntimeError):
    """Raised when the process environment cannot produce valid settings."""


class Settings(BaseModel):
    """Process-wide Flightradar24 settings, read once at startup."""

    model_config = ConfigDict(frozen=True)

    api_url: HttpUrl = Field(..., description="Flightradar24 API base URL")
    api_key: str = Field(..., min_length=1, description="Flightradar24 API token")
    timeout: float = Field(default=30.0, gt=0, description="Upstream timeout in seconds")
    log_level: str = Field(default="INFO")

    @field_validator("log_level", mode="before")
    @classmethod
    def _check_log_level(cls, value):
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        When `environ` is omitted a local .env file is loaded first and the
        real process environment is used.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        values = {}
        for field, var in ENV_VARS.items():
            value = environ.get(var)
            if value is not None and value != "":
                values[field] = value
            elif field in ("api_url", "api_key"):
                # keep required fields so a missing one is reported as such
                values[field] = value

        try:
            return cls(**values)
        except ValidationError as exc:
            problems = []
            for err in exc.errors():
                field = str(err["loc"][0]) if err["loc"] else ""
                var = ENV_VARS.get(field, field)
                if values.get(field) is None:
                    problems.append(f"{var} is required in environment variables")
                else:
                    problems.append(f"{var}: {err['msg']}")
            raise ConfigError("; ".join(problems)) from exc

    @property
    def base_url(self) -> str:
        return str(self.api_url)
