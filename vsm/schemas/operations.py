"""
Operation schemas.

ActionRequest is what the CLI hands to the dispatcher for one invocation;
each action answers with its own result model, which the CLI renders.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from pathlib import Path

from vsm.base_model import StrictModel
from vsm.services.discovery import SessionEntry
from vsm.variants import Variant


class Action(str, enum.Enum):
    LIST = 'list'
    OPEN = 'open'
    REMOVE = 'remove'
    VARIANT = 'variant'


class ActionRequest(StrictModel):
    """Everything the command line supplies for one invocation."""

    action: Action
    session_name: str | None = None  # open: None means prompt
    session_names: Sequence[str] = ()  # remove: empty means prompt
    variant: Variant | None = None  # Explicit override
    force: bool = False  # Skip remove confirmation
    set_default: bool = False  # Persist the variant used by open


class ListResult(StrictModel):
    directory: Path
    sessions: Sequence[SessionEntry]


class OpenResult(StrictModel):
    session: SessionEntry
    variant: Variant
    command: Sequence[str]  # Program followed by its arguments
    exit_code: int  # Editor's exit status
    default_changed: bool


class RemoveResult(StrictModel):
    sessions: Sequence[SessionEntry]  # Everything selected, in list order
    removed: bool  # False when the confirmation was declined


class VariantResult(StrictModel):
    previous: Variant | None  # None before the first config file is written
    current: Variant
    changed: bool


ActionResult = ListResult | OpenResult | RemoveResult | VariantResult
