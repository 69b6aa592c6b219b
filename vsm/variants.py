"""
Supported vim variants and how each one opens a session file.

The set is closed. Adding a variant means adding an enum member and its
entry in _SESSION_FLAGS; the import-time check below fails if one is missing.
"""

from __future__ import annotations

import enum
import logging
import shutil
from collections.abc import Callable
from pathlib import Path

__all__ = [
    'FALLBACK_VARIANT',
    'Variant',
    'VariantRegistry',
]

logger = logging.getLogger(__name__)


class Variant(str, enum.Enum):
    """An editor launcher able to restore a vim session file.

    Member order is the display order and must stay stable between releases,
    users memorize the numbers.
    """

    VIM = 'vim'
    NVIM = 'nvim'
    NEOVIDE = 'neovide'
    GVIM = 'gvim'

    @property
    def program(self) -> str:
        """Executable name looked up on $PATH."""
        return self.value

    def __str__(self) -> str:
        return self.value


# Used when no config file exists yet
FALLBACK_VARIANT = Variant.NVIM

# Fixed arguments placed before the session path.
# neovide forwards everything after `--` to the embedded nvim.
_SESSION_FLAGS: dict[Variant, tuple[str, ...]] = {
    Variant.VIM: ('-S',),
    Variant.NVIM: ('-S',),
    Variant.NEOVIDE: ('--', '-S'),
    Variant.GVIM: ('-S',),
}

_missing = set(Variant) - set(_SESSION_FLAGS)
if _missing:
    raise RuntimeError(f'No launch flags defined for: {sorted(v.value for v in _missing)}')


class VariantRegistry:
    """Enumerates, resolves and launches the supported variants."""

    def __init__(self, which: Callable[[str], str | None] = shutil.which) -> None:
        """
        Args:
            which: Lookup used to decide whether a program is installed.
        """
        self._which = which

    def all(self) -> tuple[Variant, ...]:
        return tuple(Variant)

    def resolve(self, explicit: Variant | None, persisted_default: Variant) -> Variant:
        """Explicit choice wins, otherwise the persisted default."""
        return explicit if explicit is not None else persisted_default

    def launch_command(self, variant: Variant, session_path: Path) -> tuple[str, list[str]]:
        """
        Build the command that opens an existing session.

        Args:
            variant: Variant to launch
            session_path: Session file, passed through unchanged as the last argument

        Returns:
            (program, arguments) without the program repeated in arguments
        """
        flags = _SESSION_FLAGS[variant]
        return variant.program, [*flags, str(session_path)]

    def is_installed(self, variant: Variant) -> bool:
        found = self._which(variant.program)
        logger.debug('Lookup %s => %s', variant.program, found or 'not found')
        return found is not None

    def installed(self) -> list[Variant]:
        """Installed variants, in display order."""
        return [v for v in self.all() if self.is_installed(v)]
