"""Configuration management for changelet."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_FILE, DEFAULT_PATTERN
from .errors import ConfigError


class ChangesConfig(BaseModel):
    """Which files in the change directory are change files."""

    pattern: str = Field(default=DEFAULT_PATTERN, description="Glob selecting change files")
    fail_fast: bool = Field(default=False, description="Stop at the first invalid file")


class BumpConfig(BaseModel):
    """Bump level rules."""

    # Apply 0.y.z leniency (breaking -> minor, everything else -> patch)
    initial_development: bool = False


class ChangelogConfig(BaseModel):
    """Changelog rendering options."""

    include_date: bool = True
    date_format: str = "%Y-%m-%d"
    bullet: str = "-"


class ChangeletConfig(BaseModel):
    """Root configuration for changelet."""

    changes: ChangesConfig = Field(default_factory=ChangesConfig)
    bump: BumpConfig = Field(default_factory=BumpConfig)
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)


def load_config(changes_dir: Path) -> ChangeletConfig:
    """Load config from <changes_dir>/config.toml.

    Args:
        changes_dir: Path to the change directory

    Returns:
        Loaded configuration, or defaults if config.toml doesn't exist

    Raises:
        ConfigError: If the file is not valid TOML or fails validation
    """
    config_path = changes_dir / CONFIG_FILE
    if not config_path.exists():
        return ChangeletConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return ChangeletConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e


def write_config_template(changes_dir: Path) -> Path:
    """Write default config.toml template.

    Args:
        changes_dir: Path to the change directory

    Returns:
        Path to the written config file
    """
    config_path = changes_dir / CONFIG_FILE
    template = {
        "changes": {"pattern": DEFAULT_PATTERN, "fail_fast": False},
        # Set to true to bump 0.y.z versions leniently while the API settles
        "bump": {"initial_development": False},
        "changelog": {"include_date": True, "date_format": "%Y-%m-%d", "bullet": "-"},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
