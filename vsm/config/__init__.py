"""Configuration: environment settings and the persisted default variant."""

from vsm.config.base import VsmSettings, get_settings
from vsm.config.store import ConfigStore, PersistedConfig

__all__ = [
    'ConfigStore',
    'PersistedConfig',
    'VsmSettings',
    'get_settings',
]
