"""
Session discovery service - finds session files in the session directory.

Any regular, non-hidden file directly inside the directory is a session.
Contents are never read, only the name and modification time.
"""

from __future__ import annotations

import logging
import stat
from datetime import datetime
from pathlib import Path

from vsm.base_model import StrictModel
from vsm.exceptions import (
    SessionDirectoryNotFoundError,
    SessionNotFoundError,
    SessionPermissionError,
    SessionRemovalError,
)

__all__ = [
    'SessionEntry',
    'SessionRegistry',
]

logger = logging.getLogger(__name__)


class SessionEntry(StrictModel):
    """A session file discovered on disk."""

    name: str  # File name, unique within a directory
    path: Path  # Absolute path
    modified_at: datetime  # Local time

    @classmethod
    def from_path(cls, path: Path) -> SessionEntry:
        return cls(
            name=path.name,
            path=path.absolute(),
            modified_at=datetime.fromtimestamp(path.stat().st_mtime).astimezone(),
        )


def _is_session_candidate(name: str) -> bool:
    return bool(name) and not name.startswith('.')


class SessionRegistry:
    """Lists, finds and deletes session files. Nothing is cached between calls."""

    def list(self, directory: Path) -> list[SessionEntry]:
        """
        Scan a directory non-recursively for session files.

        Args:
            directory: Session directory

        Returns:
            Entries sorted by name (case-sensitive, ascending)

        Raises:
            SessionDirectoryNotFoundError: Directory missing or not a directory
            SessionPermissionError: Directory cannot be read
        """
        logger.debug('Scanning %s', directory)
        try:
            children = list(directory.iterdir())
        except (FileNotFoundError, NotADirectoryError) as e:
            raise SessionDirectoryNotFoundError(directory) from e
        except PermissionError as e:
            raise SessionPermissionError(directory, e.strerror or str(e)) from e

        entries: list[SessionEntry] = []
        for child in children:
            if not _is_session_candidate(child.name):
                continue
            try:
                if not child.is_file():
                    continue
                entries.append(SessionEntry.from_path(child))
            except FileNotFoundError:
                # Removed between iterdir() and stat()
                logger.debug('Skipping vanished file %s', child)

        entries.sort(key=lambda entry: entry.name)
        logger.debug('Found %d session(s)', len(entries))
        return entries

    def find(self, directory: Path, name: str) -> SessionEntry:
        """
        Look up one session by exact file name without listing the directory.

        Raises:
            SessionDirectoryNotFoundError: Directory missing
            SessionNotFoundError: No regular, non-hidden file with that name
        """
        if not directory.is_dir():
            raise SessionDirectoryNotFoundError(directory)

        # Reject anything that is not a plain file name (e.g. "../x", "a/b")
        if not _is_session_candidate(name) or Path(name).name != name:
            raise SessionNotFoundError(name, directory)

        path = directory / name
        try:
            st = path.stat()
        except FileNotFoundError as e:
            raise SessionNotFoundError(name, directory) from e
        except PermissionError as e:
            raise SessionPermissionError(directory, e.strerror or str(e)) from e

        if not stat.S_ISREG(st.st_mode):
            raise SessionNotFoundError(name, directory)

        return SessionEntry(
            name=name,
            path=path.absolute(),
            modified_at=datetime.fromtimestamp(st.st_mtime).astimezone(),
        )

    def delete(self, entry: SessionEntry) -> None:
        """
        Remove the session file. No retries.

        Raises:
            SessionRemovalError: File already gone, or cannot be removed
        """
        logger.debug('Removing %s', entry.path)
        try:
            entry.path.unlink()
        except FileNotFoundError as e:
            raise SessionRemovalError(entry.path, 'file no longer exists') from e
        except OSError as e:
            raise SessionRemovalError(entry.path, e.strerror or str(e)) from e
