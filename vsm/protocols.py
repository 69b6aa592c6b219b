"""
Shared protocols for vsm services.

The dispatcher only talks to the terminal through Selector, so it can run
against a scripted double in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from vsm.services.discovery import SessionEntry
    from vsm.variants import Variant


class Selector(Protocol):
    """
    Protocol for synchronous choice prompts.

    Implementations:
    - TerminalSelector (ui/selector.py): numbered rich table on the terminal

    Every method raises NoCandidatesError for an empty candidate list without
    prompting, and SelectionCancelled when the user aborts.
    """

    def choose_session(self, entries: Sequence[SessionEntry]) -> SessionEntry: ...

    def choose_sessions(self, entries: Sequence[SessionEntry]) -> list[SessionEntry]:
        """One or more entries, in list order, no duplicates."""
        ...

    def choose_variant(self, variants: Sequence[Variant], current: Variant | None = None) -> Variant: ...

    def confirm(self, message: str) -> bool: ...
