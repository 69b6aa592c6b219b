"""
CLI logging setup.

Diagnostics from every vsm module go to stderr through one handler, each line
prefixed with a coloured level token:

    [✓] Removing => work.vim
    [!] No config file at ..., defaulting to nvim
"""

from __future__ import annotations

import logging

import typer

_LEVEL_TOKENS: dict[int, tuple[str, str]] = {
    logging.CRITICAL: ('x', typer.colors.BRIGHT_RED),
    logging.ERROR: ('x', typer.colors.BRIGHT_RED),
    logging.WARNING: ('!', typer.colors.BRIGHT_YELLOW),
    logging.INFO: ('✓', typer.colors.BRIGHT_GREEN),
    logging.DEBUG: ('D', typer.colors.BRIGHT_BLUE),
}


class CLILogFormatter(logging.Formatter):
    """Formatter for CLI output: level token prefix, continuation lines indented."""

    def format(self, record: logging.LogRecord) -> str:
        token, color = _LEVEL_TOKENS.get(record.levelno, ('?', typer.colors.BRIGHT_MAGENTA))
        prefix = (
            typer.style('[', fg=typer.colors.BRIGHT_WHITE, bold=True)
            + typer.style(token, fg=color, bold=True)
            + typer.style(']', fg=typer.colors.BRIGHT_WHITE, bold=True)
        )
        message = super().format(record)
        separator = '\n' + typer.style(' | ', fg=typer.colors.WHITE, bold=True) + ' '
        return f'{prefix} {message.replace(chr(10), separator)}'


class CLILogHandler(logging.StreamHandler):
    """stderr handler installed by configure_logging()."""

    def __init__(self) -> None:
        super().__init__()
        self.setFormatter(CLILogFormatter('%(message)s'))


def configure_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """
    Install the CLI handler on the package logger.

    Safe to call more than once, an earlier CLI handler is replaced.

    Args:
        verbose: Show info messages
        debug: Show debug messages (implies verbose)

    Returns:
        The configured 'vsm' logger
    """
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING

    logger = logging.getLogger('vsm')
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        if isinstance(handler, CLILogHandler):
            logger.removeHandler(handler)
    logger.addHandler(CLILogHandler())
    return logger
