#!/usr/bin/env python3
"""
Command-line interface for vsm.

Provides commands to list, open and remove vim session files, and to pick
which vim variant opens them.
"""

from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass

import pydantic
import typer

from vsm import __version__
from vsm.cli.logger import configure_logging
from vsm.config import ConfigStore, VsmSettings, get_settings
from vsm.exceptions import SelectionCancelled, VsmError
from vsm.launcher import launch_editor
from vsm.schemas import (
    Action,
    ActionRequest,
    ActionResult,
    ListResult,
    OpenResult,
    RemoveResult,
    VariantResult,
)
from vsm.services.discovery import SessionRegistry
from vsm.services.dispatcher import ActionDispatcher
from vsm.ui import TerminalSelector
from vsm.variants import Variant, VariantRegistry

logger = logging.getLogger(__name__)

app = typer.Typer(
    name='vsm',
    help='A simple, interactive, command line vim session file manager.',
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CLIState:
    debug: bool = False


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f'vsm {__version__}')
        raise typer.Exit()


@app.callback()
def global_options(
    ctx: typer.Context,
    debug: bool = typer.Option(False, '--debug', '-d', help='Show debugging messages'),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
    version: bool = typer.Option(
        False, '--version', help='Show version and exit', callback=_version_callback, is_eager=True
    ),
) -> None:
    """A simple, interactive, command line vim session file manager.

    Session files are read from $VIM_SESSIONS (default ~/.config/vim_sessions).
    """
    configure_logging(verbose=verbose, debug=debug)
    ctx.obj = CLIState(debug=debug)


def _build_dispatcher() -> ActionDispatcher:
    """Wire the dispatcher to the real environment, terminal and editor."""
    settings = get_settings(VsmSettings)
    return ActionDispatcher(
        config_store=ConfigStore.from_settings(settings),
        variants=VariantRegistry(),
        sessions=SessionRegistry(),
        selector=TerminalSelector(),
        launcher=launch_editor,
    )


def _run(ctx: typer.Context, request: ActionRequest) -> ActionResult:
    """Dispatch a request, turning vsm errors into messages and exit codes."""
    debug = isinstance(ctx.obj, CLIState) and ctx.obj.debug
    try:
        return _build_dispatcher().dispatch(request)
    except SelectionCancelled:
        typer.secho('Cancelled', fg=typer.colors.YELLOW)
        raise typer.Exit(0)
    except (VsmError, FileNotFoundError, pydantic.ValidationError) as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except Exception as e:
        logger.error(f'Failed to {request.action.value}: {e}')
        if debug:
            traceback.print_exc()
        raise typer.Exit(1)


@app.command('list')
def list_command(ctx: typer.Context) -> None:
    """List all available vim session files."""
    result = _run(ctx, ActionRequest(action=Action.LIST))
    assert isinstance(result, ListResult)

    if not result.sessions:
        typer.secho(f'No session files found in {result.directory}', fg=typer.colors.YELLOW)
        return

    width = max(len(entry.name) for entry in result.sessions)
    for entry in result.sessions:
        modified = entry.modified_at.strftime('%Y-%m-%d %H:%M')
        typer.echo(f'{entry.name:<{width}}  {modified}')


@app.command('open')
def open_command(
    ctx: typer.Context,
    name: str | None = typer.Argument(None, help='Session file name. Prompts when omitted.'),
    variant: Variant | None = typer.Option(
        None, '--variant', '-V', case_sensitive=False, help='Vim variant to open with (default: saved choice)'
    ),
    set_default: bool = typer.Option(
        False, '--set-default', help='Save the variant used as the new default (prompts without --variant)'
    ),
) -> None:
    """Load a session file in your vim variant.

    Exits with the editor's own exit status.

    Examples:
        vsm open
        vsm open work.vim
        vsm open work.vim --variant neovide --set-default
    """
    result = _run(ctx, ActionRequest(action=Action.OPEN, session_name=name, variant=variant, set_default=set_default))
    assert isinstance(result, OpenResult)

    if result.default_changed:
        typer.secho(f'✓ Default variant is now {result.variant}', fg=typer.colors.GREEN)
    if result.exit_code != 0:
        typer.secho(f'{result.variant} exited with status {result.exit_code}', fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(result.exit_code)


@app.command('remove')
def remove_command(
    ctx: typer.Context,
    names: list[str] | None = typer.Argument(None, help='Session file names. Prompts when omitted.'),
    force: bool = typer.Option(False, '--force', '-f', help='Remove without asking for confirmation'),
) -> None:
    """Remove one or more session files.

    Examples:
        vsm remove
        vsm remove old.vim scratch.vim --force
    """
    result = _run(ctx, ActionRequest(action=Action.REMOVE, session_names=list(names or ()), force=force))
    assert isinstance(result, RemoveResult)

    if not result.removed:
        typer.echo(f'Kept {", ".join(entry.name for entry in result.sessions)}')
        return
    for entry in result.sessions:
        typer.secho(f'✓ Removed {entry.name}', fg=typer.colors.GREEN)


@app.command('variant')
def variant_command(
    ctx: typer.Context,
    variant: Variant | None = typer.Argument(
        None, case_sensitive=False, help='Variant to make the default. Prompts with installed variants when omitted.'
    ),
) -> None:
    """Change the variation of vim you want to open sessions with."""
    result = _run(ctx, ActionRequest(action=Action.VARIANT, variant=variant))
    assert isinstance(result, VariantResult)

    if result.changed:
        typer.secho(f'✓ Active variant is now {result.current}', fg=typer.colors.GREEN)
    else:
        typer.echo(f'{result.current} is already the active variant')


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == '__main__':
    main()
