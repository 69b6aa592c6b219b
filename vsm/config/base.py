"""
Environment configuration for vsm.

Settings are read from environment variables (and optionally a .env file
named by LOAD_ENV_FILE). They are rebuilt on every CLI invocation, there is
no module-level singleton.
"""

from __future__ import annotations

import os
import pathlib
from typing import ClassVar, TypeVar

import pydantic
import pydantic_settings

T = TypeVar('T', bound='VsmSettings')


class VsmSettings(pydantic_settings.BaseSettings):
    """Locations vsm reads from and writes to."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_file=None,  # Only loaded when LOAD_ENV_FILE is given
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore',  # Shared .env files may carry unrelated keys
    )

    # Not read from the environment
    APP_NAME: ClassVar[str] = 'vsm'

    # Session directory override, empty counts as unset
    VIM_SESSIONS: str | None = None

    # Base directory for config files, falls back to ~/.config
    XDG_CONFIG_HOME: str | None = None

    @pydantic.field_validator('VIM_SESSIONS', 'XDG_CONFIG_HOME')
    @classmethod
    def blank_is_unset(cls, v: str | None) -> str | None:
        """Treat empty or whitespace-only values as not set."""
        if v is None or not v.strip():
            return None
        return v

    @property
    def config_home(self) -> pathlib.Path:
        if self.XDG_CONFIG_HOME:
            return pathlib.Path(self.XDG_CONFIG_HOME).expanduser()
        return pathlib.Path.home() / '.config'

    @property
    def config_dir(self) -> pathlib.Path:
        return self.config_home / self.APP_NAME

    @property
    def config_file(self) -> pathlib.Path:
        return self.config_dir / 'config.json'

    @property
    def default_session_dir(self) -> pathlib.Path:
        return self.config_home / 'vim_sessions'


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset, loads from environment variables only.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class()

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)
