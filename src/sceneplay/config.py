"""Configuration for scenario runs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class RunConfig(BaseSettings):
    """Options for discovering and running scenarios.

    Loads from ``SCENEPLAY_*`` environment variables automatically, e.g.
    ``SCENEPLAY_VERBOSITY=1`` or ``SCENEPLAY_PATTERN=check_*.py``. Keyword
    arguments (the contents of a config file) rank below the environment;
    command line flags are applied last with ``merged()``.
    """

    path: str = Field(default=".", description="File or directory to collect scenarios from")
    pattern: str = Field(default="scenario_*.py", description="Glob matched against scenario file names")
    verbosity: int = Field(default=0, ge=-1, le=2, description="-1 quiet, 0 compact, 1+ one line per test")
    show_locals: bool = Field(default=False, description="Show locals in failure tracebacks")
    log_level: str | None = Field(default=None, description="Logging level, e.g. DEBUG")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="SCENEPLAY_",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Earlier sources win.
        return env_settings, init_settings

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str | None) -> str | None:
        if v is None:
            return None
        level = v.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    @classmethod
    def from_file(cls, config_path: str | Path) -> RunConfig:
        """Load configuration from a JSON file, then apply the environment."""
        path = Path(config_path)
        return cls(**json.loads(path.read_text(encoding="utf-8")))

    def merged(self, **overrides: Any) -> RunConfig:
        """Return a validated copy with the non-None ``overrides`` applied.

        The environment is not read again.
        """
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return type(self).model_validate(data)
