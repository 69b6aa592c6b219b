"""Command-line interface. The console script entry point is vsm.cli.main:main."""

from vsm.cli.main import app

__all__ = ['app']
