"""Runtime settings for the ingestion pipeline.

Settings come from the environment (``MOD_MANAGER_*``) so the desktop
shell, the CLI and tests can all point the pipeline at a different
data root.
"""

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Environment variable overriding the application data root
DATA_DIR_ENV_VAR = "MOD_MANAGER_DATA_DIR"

APP_DIR_NAME = "mod-manager"

MODS_DIR_NAME = "mods"


def default_data_dir() -> Path:
    """Return the per-user local application data directory.

    Windows: %LOCALAPPDATA%/mod-manager
    macOS: ~/Library/Application Support/mod-manager
    Other: $XDG_DATA_HOME/mod-manager (default ~/.local/share)
    """
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
        return Path(base) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    base = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(base) / APP_DIR_NAME


class Settings(BaseSettings):
    """Resolved pipeline settings.

    Attributes:
        data_dir: Application-local data root (env: MOD_MANAGER_DATA_DIR)
    """

    model_config = SettingsConfigDict(env_prefix="MOD_MANAGER_", frozen=True)

    data_dir: Path = Field(default_factory=default_data_dir, validate_default=True)

    @field_validator("data_dir")
    @classmethod
    def resolve_data_dir(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @property
    def mods_root(self) -> Path:
        return self.data_dir / MODS_DIR_NAME

    @classmethod
    def from_env(cls, data_dir: Path | None = None) -> "Settings":
        """Build settings, preferring an explicit ``data_dir`` over the environment.

        Args:
            data_dir: Optional override (e.g. from the CLI)

        Returns:
            Settings with an absolute data directory
        """
        if data_dir is None:
            return cls()
        return cls(data_dir=data_dir)
