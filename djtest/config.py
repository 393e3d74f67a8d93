"""Project configuration loaded from djtest.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILENAME = "djtest.toml"


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


class DjtestConfig(BaseModel):
    """How targets are normalized and how the test runner is started."""

    model_config = ConfigDict(extra="forbid")

    source_dir: str = Field(
        default="src",
        description="Leading source directory stripped from dotted paths",
    )
    extensions: tuple[str, ...] = Field(
        default=(".py",),
        description="Source file extensions removed from module paths",
    )
    python: str = Field(
        default="python",
        description="Interpreter used to run manage.py",
    )
    manage_py: str = Field(
        default="manage.py",
        description="Entry script of the Django project",
    )
    test_command: str = Field(
        default="test",
        description="Management command that runs the tests",
    )

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for ext in v:
            if not ext.startswith("."):
                msg = f"Extension '{ext}' must start with a dot"
                raise ValueError(msg)
        return v


def find_project_root(
    start: Path, *, manage_py: str = "manage.py", source_dir: str = "src"
) -> Path:
    """Return the nearest directory at or above start that holds a project.

    ``<dir>/djtest.toml``, ``<dir>/manage.py`` and
    ``<dir>/<source_dir>/manage.py`` each mark a project root, so a config
    file that renames manage.py or the source directory is found before the
    defaults are applied. Falls back to start when none is found.
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        if (directory / CONFIG_FILENAME).is_file():
            return directory
        if (directory / manage_py).is_file():
            return directory
        if source_dir and (directory / source_dir / manage_py).is_file():
            return directory
    return start


def load_config(root: Path) -> DjtestConfig:
    """Load configuration from djtest.toml if it exists."""
    config_path = root / CONFIG_FILENAME

    if not config_path.is_file():
        return DjtestConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return DjtestConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
