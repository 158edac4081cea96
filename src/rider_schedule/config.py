"""Configuration for rider schedule runs.

Two layers:
  - Settings: runtime knobs (API host, pacing, output paths, logging) loaded
    from environment variables / .env with the RIDER_SCHEDULE_ prefix.
  - ShowConfig: what to schedule (show, riders, class label overrides),
    loaded from config.json. A missing or broken file falls back to defaults.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from src.rider_schedule.errors import ConfigLoadError
from src.rider_schedule.logging import get_logger

log = get_logger(__name__)

DEFAULT_SHOW_ID = 11474


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables with sensible defaults.

    For local development, create a .env file in the project root.
    """

    api_base_url: str = Field(
        default="https://www.foxvillage.com",
        description="Base URL of the show results site",
    )
    request_timeout: float = Field(
        default=30.0,
        description="Per-request timeout in seconds",
    )
    pacing_delay: float = Field(
        default=0.5,
        description="Pause between per-rider schedule fetches, in seconds",
    )

    # Paths
    config_path: str = Field(
        default="config.json",
        description="Show configuration file (showId, riderNames, classMapping)",
    )
    output_path: str = Field(
        default="schedule.json",
        description="Primary schedule output file",
    )
    published_output_path: str = Field(
        default="docs/schedule.json",
        description="Published copy of the schedule (served from docs/)",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for scheduled jobs)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "RIDER_SCHEDULE_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the runtime settings singleton.

    Returns:
        Settings: Runtime settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


class ShowConfig(BaseModel):
    """Contents of config.json.

    classMapping is ordered: patterns are tried in file order and the first
    one found in a test name wins.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    showId: int = DEFAULT_SHOW_ID
    riderNames: list[str] = Field(default_factory=list)
    classMapping: dict[str, str] = Field(default_factory=dict)

    @field_validator("showId", mode="before")
    @classmethod
    def _default_show_id(cls, value):
        return DEFAULT_SHOW_ID if value in (None, "", 0) else value

    @field_validator("riderNames", "classMapping", mode="before")
    @classmethod
    def _null_as_empty(cls, value, info):
        if value is None:
            return [] if info.field_name == "riderNames" else {}
        return value

    def with_rider_names(self, names: list[str]) -> "ShowConfig":
        """Copy of this config scheduling names instead of riderNames."""
        return self.model_copy(update={"riderNames": list(names)})


def read_show_config(path: Path) -> ShowConfig:
    """Read and validate a show configuration file.

    Raises:
        ConfigLoadError: If the file is missing, not JSON, or fails validation.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as exc:
        raise ConfigLoadError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except ValueError as exc:
        raise ConfigLoadError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigLoadError(f"{path} must contain a JSON object")
    try:
        return ShowConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigLoadError(f"{path} is invalid: {exc}") from exc


def load_show_config(path: Path | str) -> ShowConfig:
    """Load the show configuration, falling back to defaults on any failure."""
    path = Path(path)
    try:
        config = read_show_config(path)
    except ConfigLoadError as exc:
        log.warning("config_load_failed", path=str(path), error=str(exc), using="defaults")
        return ShowConfig()

    log.info(
        "config_loaded",
        path=str(path),
        show_id=config.showId,
        riders=len(config.riderNames),
        class_mappings=len(config.classMapping),
    )
    return config
