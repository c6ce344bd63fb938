"""Configuration management for Roster.

Settings live in settings.json inside the config directory:
- departments: department names offered by the CLI
- raise_threshold / raise_amount: defaults for `roster raise`
- top_paid_limit: default N for `roster top-paid`
- first_employee_id: first ID handed out to employees added without one
- seed_file: roster YAML loaded into the store at startup (optional)

Config directory resolution:
1. ROSTER_CONFIG_PATH environment variable (if set)
2. $XDG_CONFIG_HOME/roster/ (default ~/.config/roster/)

Only the settings file is ever written; the roster itself is never saved.
"""

import json
import os
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigError


APP_NAME = "roster"
SETTINGS_FILENAME = "settings.json"

DEFAULT_DEPARTMENTS = [
    "Quality Assurance",
    "Frontend",
    "Finance",
    "Operations",
    "Backend",
    "DevOPs",
]


class RosterSettings(BaseModel):
    """Validated contents of settings.json."""

    model_config = ConfigDict(extra="forbid")

    departments: List[str] = Field(
        default_factory=lambda: list(DEFAULT_DEPARTMENTS),
        description="Department names offered by the CLI",
    )
    raise_threshold: float = Field(default=4.5, ge=0, le=5, description="Minimum rating for a raise")
    raise_amount: float = Field(default=1000.0, description="Amount added by a raise")
    top_paid_limit: int = Field(default=5, ge=0, description="Default size of the top-paid report")
    first_employee_id: int = Field(default=1000, ge=0, description="First generated employee ID")
    seed_file: Optional[str] = Field(default=None, description="Roster YAML loaded at startup")


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. ROSTER_CONFIG_PATH environment variable
    2. ~/.config/roster/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("ROSTER_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load raw settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)

    Raises:
        ConfigError: If the file is not a JSON object
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    try:
        with open(settings_file, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {settings_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings must be a JSON object: {settings_file}")
    return data


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def validate_settings(settings: dict) -> RosterSettings:
    """Validate a raw settings dict.

    Raises:
        ConfigError: Listing every invalid key
    """
    try:
        return RosterSettings(**settings)
    except PydanticValidationError as e:
        problems = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigError(f"Invalid settings in {get_settings_path()}: {'; '.join(problems)}") from e


def load_roster_settings() -> RosterSettings:
    """Load and validate settings.json, filling in defaults."""
    return validate_settings(load_settings())


def get_setting(key: str, default: Any = None) -> Any:
    """Get a raw setting value from settings.json.

    Args:
        key: Setting key (e.g., "raise_amount")
        default: Default value if key not set

    Returns:
        Setting value or default
    """
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    The merged settings are validated before anything is written.

    Args:
        key: Setting key
        value: Value to set

    Returns:
        Path to the saved settings file

    Raises:
        ConfigError: If the key is unknown or the value invalid
    """
    settings = load_settings()
    settings[key] = value
    validate_settings(settings)
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting, reverting it to its default.

    Returns:
        True if the key was set, False otherwise
    """
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True
