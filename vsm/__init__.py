"""vsm - interactive command line manager for vim session files."""

__version__ = '0.2.0'
