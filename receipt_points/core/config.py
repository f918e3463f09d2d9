"""Configuration management.

This module defines a ``Settings`` class that reads configuration
values from environment variables and provides sensible defaults.
``.env`` support is implemented by loading files from the repository
root and from whatever python-dotenv discovers from the current working
directory. Files are loaded in order without overriding already-set
variables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# -----------------------------------------------------------------------------
# .env loading

_THIS_FILE = Path(__file__).resolve()
_REPO_ROOT = _THIS_FILE.parents[2]
_ROOT_ENV = _REPO_ROOT / ".env"

_candidate_envs: list[str] = []
if _ROOT_ENV.exists():
    _candidate_envs.append(str(_ROOT_ENV))

_FOUND_ENV = find_dotenv(usecwd=True)
if _FOUND_ENV and _FOUND_ENV not in _candidate_envs:
    _candidate_envs.append(_FOUND_ENV)

for _env_path in _candidate_envs:
    load_dotenv(dotenv_path=_env_path, override=False)


DEFAULT_PORT = 8080


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from the environment with sensible defaults. Empty
    environment values are ignored, so ``PORT=`` behaves like an unset
    ``PORT`` and falls back to ``8080``.
    """

    model_config = SettingsConfigDict(
        env_file=tuple(_candidate_envs) if _candidate_envs else (".env",),
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # API Settings
    PROJECT_NAME: str = "Receipt Points"
    ENVIRONMENT: str = Field(default="development")

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=DEFAULT_PORT)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Sentry
    SENTRY_DSN: Optional[str] = Field(default=None)
    SENTRY_TRACES_SAMPLE_RATE: float = Field(default=0.0)
    SENTRY_RELEASE: Optional[str] = Field(default=None)

    @field_validator("PORT")
    @classmethod
    def _port_in_range(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {v}")
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalise_log_level(cls, v):
        return str(v).strip().upper() if v is not None else "INFO"


# Instantiate global settings
settings = Settings()
