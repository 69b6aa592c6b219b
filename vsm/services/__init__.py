"""Service layer for session operations."""

from vsm.services.discovery import SessionEntry, SessionRegistry

__all__ = [
    'SessionEntry',
    'SessionRegistry',
]
