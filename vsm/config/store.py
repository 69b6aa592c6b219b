"""
Persisted vsm configuration.

Stores the user's default variant in <config home>/vsm/config.json:

    {"default_variant": "nvim"}

The file is created the first time the user picks a variant, read on every
run, and never deleted by vsm. A missing file means FALLBACK_VARIANT.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pydantic

from vsm.base_model import StrictModel
from vsm.config.base import VsmSettings
from vsm.exceptions import ConfigError
from vsm.variants import FALLBACK_VARIANT, Variant

__all__ = [
    'ConfigStore',
    'PersistedConfig',
]

logger = logging.getLogger(__name__)


class PersistedConfig(StrictModel):
    """The config.json file structure."""

    default_variant: Variant


class ConfigStore:
    """Reads and writes the persisted config, resolves the session directory."""

    def __init__(self, config_file: Path, settings: VsmSettings) -> None:
        """
        Args:
            config_file: Location of config.json
            settings: Environment settings used for the session directory
        """
        self.config_file = config_file
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: VsmSettings) -> ConfigStore:
        return cls(settings.config_file, settings)

    def resolve_session_directory(self) -> Path:
        """$VIM_SESSIONS when set, otherwise <config home>/vim_sessions.

        No existence check, callers validate before scanning.
        """
        if self.settings.VIM_SESSIONS:
            return Path(self.settings.VIM_SESSIONS).expanduser()
        return self.settings.default_session_dir

    def config_file_exists(self) -> bool:
        return self.config_file.is_file()

    def load_default_variant(self) -> Variant:
        """
        Read the default variant from disk.

        Returns:
            Persisted variant, or FALLBACK_VARIANT if the file is missing

        Raises:
            ConfigError: File unreadable, malformed, or naming an unknown variant
        """
        if not self.config_file.exists():
            logger.info('No config file at %s, defaulting to %s', self.config_file, FALLBACK_VARIANT)
            return FALLBACK_VARIANT

        logger.debug('Reading %s', self.config_file)
        try:
            contents = self.config_file.read_text(encoding='utf-8')
        except OSError as e:
            raise ConfigError(self.config_file, e.strerror or str(e)) from e

        try:
            config = PersistedConfig.model_validate_json(contents)
        except pydantic.ValidationError as e:
            reason = '; '.join(err['msg'] for err in e.errors())
            raise ConfigError(self.config_file, reason) from e

        return config.default_variant

    def save_default_variant(self, variant: Variant) -> None:
        """
        Write the default variant, replacing any prior content.

        Raises:
            ConfigError: Directory or file could not be written
        """
        config = PersistedConfig(default_variant=variant)
        tmp_file = self.config_file.with_suffix('.tmp.json')

        logger.debug('Writing config file => %s', self.config_file)
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            tmp_file.write_text(config.model_dump_json(indent=2) + '\n', encoding='utf-8')
            # Atomic rename
            tmp_file.replace(self.config_file)
        except OSError as e:
            raise ConfigError(self.config_file, e.strerror or str(e)) from e
