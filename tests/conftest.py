"""Shared pytest fixtures for vsm tests."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import pytest

from vsm.config import ConfigStore, VsmSettings
from vsm.exceptions import NoCandidatesError, SelectionCancelled
from vsm.services.discovery import SessionEntry, SessionRegistry
from vsm.services.dispatcher import ActionDispatcher
from vsm.variants import Variant, VariantRegistry


class ScriptedSelector:
    """Selector double answering from preset values instead of the terminal.

    session, session_names and variant name the choice to return, None means cancel.
    Every prompt is recorded in `prompts`.
    """

    def __init__(self) -> None:
        self.session: str | None = None
        self.session_names: list[str] | None = None
        self.variant: Variant | None = None
        self.answer = False
        self.prompts: list[str] = []
        self.offered_variants: list[Variant] = []
        self.confirmations: list[str] = []

    def choose_session(self, entries: Sequence[SessionEntry]) -> SessionEntry:
        if not entries:
            raise NoCandidatesError('session files')
        self.prompts.append('session')
        if self.session is None:
            raise SelectionCancelled()
        return next(e for e in entries if e.name == self.session)

    def choose_sessions(self, entries: Sequence[SessionEntry]) -> list[SessionEntry]:
        if not entries:
            raise NoCandidatesError('session files')
        self.prompts.append('sessions')
        if self.session_names is None:
            raise SelectionCancelled()
        return [e for e in entries if e.name in self.session_names]

    def choose_variant(self, variants: Sequence[Variant], current: Variant | None = None) -> Variant:
        if not variants:
            raise NoCandidatesError('vim variants')
        self.prompts.append('variant')
        self.offered_variants = list(variants)
        if self.variant is None:
            raise SelectionCancelled()
        return self.variant

    def confirm(self, message: str) -> bool:
        self.prompts.append('confirm')
        self.confirmations.append(message)
        return self.answer


class RecordingLauncher:
    """Launcher double: records commands, returns a fixed exit code."""

    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.calls: list[tuple[str, list[str]]] = []

    def __call__(self, program: str, args: Sequence[str]) -> int:
        self.calls.append((program, list(args)))
        return self.exit_code


@pytest.fixture(autouse=True)
def reset_vsm_logger():
    """Drop handlers the CLI installs so they don't outlive the test's streams."""
    yield
    logger = logging.getLogger('vsm')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def session_dir(tmp_path: Path) -> Path:
    directory = tmp_path / 'sessions'
    directory.mkdir()
    return directory


@pytest.fixture
def config_home(tmp_path: Path) -> Path:
    return tmp_path / 'config'


@pytest.fixture
def settings(session_dir: Path, config_home: Path) -> VsmSettings:
    return VsmSettings(VIM_SESSIONS=str(session_dir), XDG_CONFIG_HOME=str(config_home))


@pytest.fixture
def config_store(settings: VsmSettings) -> ConfigStore:
    return ConfigStore.from_settings(settings)


@pytest.fixture
def selector() -> ScriptedSelector:
    return ScriptedSelector()


@pytest.fixture
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture
def installed() -> set[str]:
    """Programs the fake `which` reports as installed. Mutate in tests."""
    return {'vim', 'nvim'}


@pytest.fixture
def variants(installed: set[str]) -> VariantRegistry:
    return VariantRegistry(which=lambda program: f'/usr/bin/{program}' if program in installed else None)


@pytest.fixture
def dispatcher(
    config_store: ConfigStore,
    variants: VariantRegistry,
    selector: ScriptedSelector,
    launcher: RecordingLauncher,
) -> ActionDispatcher:
    return ActionDispatcher(
        config_store=config_store,
        variants=variants,
        sessions=SessionRegistry(),
        selector=selector,
        launcher=launcher,
    )


def make_sessions(directory: Path, *names: str) -> list[Path]:
    """Create empty session files."""
    paths = []
    for name in names:
        path = directory / name
        path.write_text('" session\n')
        paths.append(path)
    return paths


@pytest.fixture
def make_session_files():
    return make_sessions
