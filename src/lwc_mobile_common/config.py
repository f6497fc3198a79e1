# SPDX-License-Identifier: MIT
"""Project configuration loading from pyproject.toml.

Settings live in the ``[tool.lwc-mobile]`` table:

.. code-block:: toml

    [tool.lwc-mobile]
    default_platform = "ios"
    minimum_ios_version = "13.0"
    minimum_android_version = "26"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .constants import (
    CONFIG_TABLE,
    DEFAULT_MINIMUM_ANDROID_VERSION,
    DEFAULT_MINIMUM_IOS_VERSION,
)
from .flags import platform_flag_is_ios, platform_flag_is_valid
from .version import ParseError, Version, parse_version


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class MobileConfig:
    """Project configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        default_platform: Platform used when no --platform flag is given
        minimum_ios_version: Oldest supported iOS version
        minimum_android_version: Oldest supported Android API level
    """

    project_dir: Path
    default_platform: str = ""
    minimum_ios_version: str = DEFAULT_MINIMUM_IOS_VERSION
    minimum_android_version: str = DEFAULT_MINIMUM_ANDROID_VERSION

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "MobileConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            MobileConfig instance

        Raises:
            ConfigError: If the file is invalid or holds invalid settings
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "MobileConfig":
        """Create MobileConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a configured platform or version is invalid
        """
        tool = pyproject.get("tool", {})
        table = tool.get(CONFIG_TABLE, {}) if isinstance(tool, dict) else None
        if not isinstance(table, dict):
            raise ConfigError(f"[tool.{CONFIG_TABLE}] must be a table")

        default_platform = table.get("default_platform", "")
        if not isinstance(default_platform, str):
            raise ConfigError(f"default_platform in [tool.{CONFIG_TABLE}] must be a string")
        if default_platform and not platform_flag_is_valid(default_platform):
            raise ConfigError(
                f"Invalid default_platform '{default_platform}' in [tool.{CONFIG_TABLE}]"
            )

        return cls(
            project_dir=project_dir,
            default_platform=default_platform.lower(),
            minimum_ios_version=_version_setting(
                table, "minimum_ios_version", DEFAULT_MINIMUM_IOS_VERSION
            ),
            minimum_android_version=_version_setting(
                table, "minimum_android_version", DEFAULT_MINIMUM_ANDROID_VERSION
            ),
        )

    def minimum_version(self, platform: str) -> Version:
        """Return the configured minimum version for a platform flag."""
        if platform_flag_is_ios(platform):
            return parse_version(self.minimum_ios_version)
        return parse_version(self.minimum_android_version)


def _version_setting(table: dict[str, Any], key: str, default: str) -> str:
    """Read a version setting, accepting strings and whole-number API levels.

    Floats are rejected: TOML reads ``14.10`` as ``14.1``.

    Raises:
        ConfigError: If the value has another type or does not parse
    """
    value = table.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ConfigError(
            f"{key} in [tool.{CONFIG_TABLE}] must be a quoted version string, "
            f"got {type(value).__name__} {value!r}"
        )

    value = str(value)
    try:
        parse_version(value)
    except ParseError as e:
        raise ConfigError(f"Invalid {key} in [tool.{CONFIG_TABLE}]: {e}") from e
    return value


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Every ancestor of ``start_dir`` is checked, the filesystem root included.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    for candidate in (current, *current.parents):
        if (candidate / "pyproject.toml").exists():
            return candidate

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> MobileConfig:
    """Load configuration from the project directory.

    Without an explicit directory the project root is searched for; when none
    is found the defaults for the current directory are returned.

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        try:
            project_dir = find_project_root()
        except ConfigError:
            return MobileConfig(project_dir=Path.cwd())

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return MobileConfig.from_pyproject(project_path)

    return MobileConfig(project_dir=project_path)
