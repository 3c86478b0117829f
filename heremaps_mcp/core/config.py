"""Configuration management for the HERE Maps tool server."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

_REPO_ROOT = Path(__file__).resolve().parents[2]
_PACKAGE_DIR = Path(__file__).resolve().parents[1]
# Repo root .env first, then the package directory, then the working directory.
_ENV_FILE_CANDIDATES: tuple[str, ...] = (
    str(_REPO_ROOT / ".env"),
    str(_PACKAGE_DIR / ".env"),
    ".env",
)


class MapsSettings(BaseSettings):
    """Centralised configuration derived from environment variables."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="Optional log file path; empty or unset keeps logging on stderr only",
    )

    here_maps_api_key: SecretStr = Field(..., description="HERE Maps API key")
    http_timeout: float = Field(10.0, description="Timeout in seconds for HERE API calls")

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_CANDIDATES,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> MapsSettings:
    """Return a cached MapsSettings instance."""

    return MapsSettings()  # type: ignore[call-arg]


def load_settings() -> MapsSettings:
    """Load settings, reporting a missing or invalid value as ConfigurationError."""

    try:
        return get_settings()
    except ValidationError as exc:
        missing = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
        raise ConfigurationError(
            f"Invalid configuration, check environment variables: {', '.join(missing)}"
        ) from exc


def resolved_env_file() -> str | None:
    """Return the first readable .env file from the candidate list."""

    for candidate in _ENV_FILE_CANDIDATES:
        path = Path(candidate).expanduser()
        if path.is_file():
            return str(path)
    return None


def env_file_candidates() -> tuple[str, ...]:
    """Expose configured env file search order for diagnostics."""

    return _ENV_FILE_CANDIDATES
