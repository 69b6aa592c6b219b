"""
Action dispatcher - runs one list/open/remove/variant request.

Each call is independent: the session directory is rescanned, the config file
is reread, and nothing is retried. Errors from the collaborators propagate
unchanged to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from vsm.config.store import ConfigStore
from vsm.exceptions import ConfigError, NoSupportedVariantError
from vsm.protocols import Selector
from vsm.schemas.operations import (
    Action,
    ActionRequest,
    ActionResult,
    ListResult,
    OpenResult,
    RemoveResult,
    VariantResult,
)
from vsm.services.discovery import SessionEntry, SessionRegistry
from vsm.variants import Variant, VariantRegistry

__all__ = ['ActionDispatcher']

logger = logging.getLogger(__name__)

Launcher = Callable[[str, Sequence[str]], int]


class ActionDispatcher:
    """Ties a request to the registries, the selector and the launcher."""

    def __init__(
        self,
        config_store: ConfigStore,
        variants: VariantRegistry,
        sessions: SessionRegistry,
        selector: Selector,
        launcher: Launcher,
    ) -> None:
        self.config_store = config_store
        self.variants = variants
        self.sessions = sessions
        self.selector = selector
        self.launcher = launcher

    def dispatch(self, request: ActionRequest) -> ActionResult:
        logger.debug('Dispatching %s', request)
        match request.action:
            case Action.LIST:
                return self.list_sessions()
            case Action.OPEN:
                return self.open_session(request.session_name, request.variant, request.set_default)
            case Action.REMOVE:
                return self.remove_sessions(request.session_names, request.force)
            case Action.VARIANT:
                return self.change_variant(request.variant)

    def list_sessions(self) -> ListResult:
        directory = self.config_store.resolve_session_directory()
        return ListResult(directory=directory, sessions=self.sessions.list(directory))

    def open_session(
        self,
        session_name: str | None,
        explicit_variant: Variant | None = None,
        set_default: bool = False,
    ) -> OpenResult:
        """
        Open a session in the resolved variant and wait for the editor.

        Args:
            session_name: Exact session file name, or None to prompt
            explicit_variant: Variant for this run (persisted too if set_default)
            set_default: Save the variant used as the new default, prompting if none given

        Returns:
            OpenResult carrying the editor's exit code
        """
        entry = self._resolve_entry(session_name)

        default_changed = False
        if set_default:
            variant = explicit_variant or self._choose_installed_variant()
            default_changed = self._save_default(variant, self._current_default())
        elif explicit_variant is not None:
            # Config file is not read, so a broken one does not block this open
            variant = explicit_variant
        else:
            variant = self.variants.resolve(None, self.config_store.load_default_variant())

        program, args = self.variants.launch_command(variant, entry.path)
        logger.info('Opening %s with %s', entry.name, variant)
        exit_code = self.launcher(program, args)

        return OpenResult(
            session=entry,
            variant=variant,
            command=[program, *args],
            exit_code=exit_code,
            default_changed=default_changed,
        )

    def remove_sessions(self, session_names: Sequence[str] = (), force: bool = False) -> RemoveResult:
        """
        Delete one or more session files, asking once first unless force is set.

        Every named session must exist before anything is deleted. The
        confirmation defaults to no, a declined or mistyped answer keeps all files.
        """
        entries = self._resolve_entries(session_names)
        names = ', '.join(e.name for e in entries)

        if not force and not self.selector.confirm(f'Remove {names}?'):
            logger.info('Keeping %s', names)
            return RemoveResult(sessions=entries, removed=False)

        for entry in entries:
            logger.info('Removing => %s', entry.name)
            self.sessions.delete(entry)
        return RemoveResult(sessions=entries, removed=True)

    def change_variant(self, explicit_variant: Variant | None = None) -> VariantResult:
        """
        Change the persisted default variant.

        Without an explicit variant the user picks from the installed ones.
        The file is only rewritten if the choice differs, or no valid file exists yet.
        """
        previous = self._current_default()
        variant = explicit_variant or self._choose_installed_variant(current=previous)
        changed = self._save_default(variant, previous)
        return VariantResult(previous=previous, current=variant, changed=changed)

    def _resolve_entry(self, session_name: str | None) -> SessionEntry:
        directory = self.config_store.resolve_session_directory()
        if session_name is not None:
            return self.sessions.find(directory, session_name)
        return self.selector.choose_session(self.sessions.list(directory))

    def _resolve_entries(self, session_names: Sequence[str]) -> list[SessionEntry]:
        directory = self.config_store.resolve_session_directory()
        if not session_names:
            return self.selector.choose_sessions(self.sessions.list(directory))
        found = {name: self.sessions.find(directory, name) for name in session_names}
        return sorted(found.values(), key=lambda e: e.name)

    def _choose_installed_variant(self, current: Variant | None = None) -> Variant:
        installed = self.variants.installed()
        if not installed:
            raise NoSupportedVariantError([v.program for v in self.variants.all()])
        return self.selector.choose_variant(installed, current=current)

    def _current_default(self) -> Variant | None:
        """Persisted default, None when there is no usable config file yet."""
        if not self.config_store.config_file_exists():
            return None
        try:
            current = self.config_store.load_default_variant()
        except ConfigError as e:
            # Setting a default explicitly is how a broken file gets repaired
            logger.warning(f'{e}, it will be replaced')
            return None
        logger.info('Current active variant is => %s', current)
        return current

    def _save_default(self, variant: Variant, current: Variant | None) -> bool:
        if variant == current:
            logger.debug('%s is already the default', variant)
            return False
        self.config_store.save_default_variant(variant)
        logger.info('Default variant set to %s', variant)
        return True
