"""
Shared exceptions for vsm.

Exception Hierarchy:
    VsmError (base)
    ├── ConfigError (unreadable or invalid persisted config)
    ├── SessionIOError (filesystem failures around the session directory)
    │   ├── SessionDirectoryNotFoundError
    │   ├── SessionPermissionError
    │   └── SessionRemovalError
    ├── SessionNotFoundError (explicit name has no matching session)
    ├── SelectionError (interactive prompt did not produce a choice)
    │   ├── SelectionCancelled (user aborted, not a fault)
    │   └── NoCandidatesError (nothing to choose from)
    ├── NoSupportedVariantError (no supported editor on $PATH)
    └── LaunchError (editor process could not be run)
        └── EditorNotFoundError
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class VsmError(Exception):
    """Base exception for all vsm errors."""


class ConfigError(VsmError):
    """Raised when the persisted config cannot be read, parsed or written."""

    def __init__(self, config_file: Path, reason: str) -> None:
        self.config_file = config_file
        self.reason = reason
        super().__init__(f'Invalid config file {config_file}: {reason}')


class SessionIOError(VsmError):
    """Base exception for filesystem failures on sessions."""


class SessionDirectoryNotFoundError(SessionIOError):
    """Raised when the session directory does not exist."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(
            f'Session directory does not exist: {directory}\n'
            f'Create it, or point VIM_SESSIONS at the directory holding your session files.'
        )


class SessionPermissionError(SessionIOError):
    """Raised when the session directory cannot be read."""

    def __init__(self, directory: Path, reason: str) -> None:
        self.directory = directory
        super().__init__(f'Cannot read session directory {directory}: {reason}')


class SessionRemovalError(SessionIOError):
    """Raised when a session file could not be deleted."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f'Failed to remove {path}: {reason}')


class SessionNotFoundError(VsmError):
    """Raised when an explicitly named session does not exist."""

    def __init__(self, name: str, directory: Path) -> None:
        self.name = name
        self.directory = directory
        super().__init__(f"Session '{name}' not found in {directory}")


class SelectionError(VsmError):
    """Base exception for interactive selection outcomes."""


class SelectionCancelled(SelectionError):
    """Raised when the user aborts an interactive prompt."""

    def __init__(self) -> None:
        super().__init__('Cancelled')


class NoCandidatesError(SelectionError):
    """Raised instead of prompting when there is nothing to choose from."""

    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f'No {what} to choose from')


class NoSupportedVariantError(VsmError):
    """Raised when none of the supported editors are installed."""

    def __init__(self, searched: Sequence[str]) -> None:
        self.searched = list(searched)
        super().__init__(
            f'None of the supported vim variants were found on your system: {", ".join(self.searched)}'
        )


class LaunchError(VsmError):
    """Raised when the editor process cannot be started."""


class EditorNotFoundError(LaunchError):
    """Raised when the editor program is not on $PATH."""

    def __init__(self, program: str) -> None:
        self.program = program
        super().__init__(f'{program} not found in PATH. Install it, or open with another --variant.')
