# src/modinput/core/config.py
"""
Harness settings.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class HarnessSettings(BaseModel):
    """Runtime settings for the harness.

    Example YAML:
        log_level: DEBUG
        flush_each_event: false

    Or from the environment:
        MODINPUT_LOG_LEVEL=DEBUG
    """

    model_config = {"frozen": True}

    log_level: Literal["DEBUG", "INFO", "WARN", "ERROR", "FATAL"] = Field(
        default="WARN",
        description="Minimum severity for harness diagnostics on the side channel",
    )
    flush_each_event: bool = Field(
        default=True,
        description="Flush stdout after every event instead of only on close",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        """Accept lowercase tokens and the stdlib WARNING/CRITICAL spellings."""
        if not isinstance(v, str):
            return v
        token = v.strip().upper()
        return {"WARNING": "WARN", "CRITICAL": "FATAL"}.get(token, token)


def load_settings(config_path: Path | None = None) -> HarnessSettings:
    """Load settings with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (MODINPUT_*) - highest priority
    2. Config file, when given
    3. Defaults from Pydantic schema - lowest priority

    Args:
        config_path: Optional path to a YAML/TOML settings file

    Returns:
        Validated HarnessSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If an explicit config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="MODINPUT",
        settings_files=[str(config_path)] if config_path is not None else [],
        environments=False,
        load_dotenv=False,
    )

    # Dynaconf returns uppercase keys and mixes in its own internals
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {
        k.lower(): v
        for k, v in dynaconf_settings.as_dict().items()
        if k not in internal_keys
    }
    return HarnessSettings(**raw_config)
