"""
Terminal implementation of the Selector protocol.

Shows a numbered table and reads one answer at a time:
- a number picks the row with that number (several numbers where more than one
  row may be picked)
- any other text filters rows by fuzzy match (one match is picked directly)
- an empty answer, Ctrl-C or EOF cancels
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from vsm.exceptions import NoCandidatesError, SelectionCancelled
from vsm.services.discovery import SessionEntry
from vsm.variants import Variant

__all__ = [
    'TerminalSelector',
    'fuzzy_match',
]

logger = logging.getLogger(__name__)

HELP_MESSAGE = 'Enter a number to select, type to filter, press Enter to cancel'
MULTI_HELP_MESSAGE = 'Enter one or more numbers (e.g. 1 3) to select, type to filter, press Enter to cancel'
TIME_FORMAT = '%Y-%m-%d %H:%M'


def fuzzy_match(query: str, candidate: str) -> bool:
    """True if every character of query appears in candidate, in order (case-insensitive)."""
    remaining = iter(candidate.lower())
    return all(char in remaining for char in query.lower())


class TerminalSelector:
    """Prompts on the controlling terminal using rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def choose_session(self, entries: Sequence[SessionEntry]) -> SessionEntry:
        if not entries:
            raise NoCandidatesError('session files')
        (index,) = self._choose(
            title='Which session?',
            headers=('Session', 'Modified'),
            keys=[e.name for e in entries],
            rows=self._session_rows(entries),
        )
        return entries[index]

    def choose_sessions(self, entries: Sequence[SessionEntry]) -> list[SessionEntry]:
        if not entries:
            raise NoCandidatesError('session files')
        indexes = self._choose(
            title='Which session(s) would you like to remove?',
            headers=('Session', 'Modified'),
            keys=[e.name for e in entries],
            rows=self._session_rows(entries),
            multiple=True,
        )
        return [entries[i] for i in indexes]

    def choose_variant(self, variants: Sequence[Variant], current: Variant | None = None) -> Variant:
        if not variants:
            raise NoCandidatesError('vim variants')
        rows = [(v.value, 'current' if v == current else '') for v in variants]
        (index,) = self._choose(
            title='Which variant would you like to use?',
            headers=('Variant', ''),
            keys=[v.value for v in variants],
            rows=rows,
        )
        return variants[index]

    def confirm(self, message: str) -> bool:
        """Yes/no question. Only 'y' or 'yes' count as yes."""
        answer = self._ask(f'{escape(message)} (y/N)')
        return answer.strip().lower() in ('y', 'yes')

    @staticmethod
    def _session_rows(entries: Sequence[SessionEntry]) -> list[tuple[str, str]]:
        return [(escape(e.name), e.modified_at.strftime(TIME_FORMAT)) for e in entries]

    def _ask(self, prompt: str) -> str:
        try:
            return Prompt.ask(prompt, default='', show_default=False, console=self.console)
        except (KeyboardInterrupt, EOFError) as e:
            self.console.print()
            raise SelectionCancelled() from e

    def _choose(
        self,
        title: str,
        headers: Sequence[str],
        keys: Sequence[str],
        rows: Sequence[Sequence[str]],
        multiple: bool = False,
    ) -> list[int]:
        """Return the indexes (into keys) of the chosen rows, exactly one unless multiple."""
        everything = list(range(len(keys)))
        visible = everything

        while True:
            self._render(title, headers, rows, visible, MULTI_HELP_MESSAGE if multiple else HELP_MESSAGE)
            answer = self._ask('Your choice').strip()
            if not answer:
                raise SelectionCancelled()

            numbers = answer.replace(',', ' ').split()
            # isdecimal, not isdigit: int() rejects digits such as '²'
            if numbers and all(n.isdecimal() for n in numbers):
                positions = [int(n) - 1 for n in numbers]
                if (multiple or len(positions) == 1) and all(0 <= p < len(visible) for p in positions):
                    return sorted({visible[p] for p in positions})
                self.console.print('[red]Invalid choice. Please try again.[/red]')
                continue

            matches = [i for i in everything if fuzzy_match(answer, keys[i])]
            logger.debug('Filter %r matched %d row(s)', answer, len(matches))
            if len(matches) == 1:
                return matches
            if not matches:
                self.console.print(f'[yellow]No matches for {escape(answer)!r}[/yellow]')
                visible = everything
            else:
                visible = matches

    def _render(
        self,
        title: str,
        headers: Sequence[str],
        rows: Sequence[Sequence[str]],
        visible: Sequence[int],
        help_message: str,
    ) -> None:
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style='bold cyan')
        table.add_column('#', style='bold yellow', justify='right')
        table.add_column(headers[0], style='green')
        table.add_column(headers[1], style='blue')

        for number, index in enumerate(visible, 1):
            table.add_row(str(number), *rows[index])

        self.console.print()
        self.console.print(table)
        self.console.print(f'[dim]{help_message}[/dim]')
