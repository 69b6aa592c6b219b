"""Terminal user interface."""

from vsm.ui.selector import TerminalSelector

__all__ = ['TerminalSelector']
