"""
Editor launcher utility.

Runs the editor as a child process sharing this terminal, waits for it, and
hands back its exit status.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import signal
import subprocess
from collections.abc import Sequence

from vsm.exceptions import EditorNotFoundError, LaunchError

logger = logging.getLogger(__name__)


def launch_editor(program: str, args: Sequence[str]) -> int:
    """
    Launch an editor and wait for it to exit.

    stdin/stdout/stderr are inherited. SIGINT is ignored here while the child
    runs, so Ctrl-C inside the editor reaches only the editor.

    Args:
        program: Executable name, looked up on $PATH
        args: Arguments after the program name

    Returns:
        The child's exit code, or 128 + signal number if it was killed by a signal

    Raises:
        EditorNotFoundError: If program is not found in PATH
        LaunchError: If the process cannot be started
    """
    program_path = shutil.which(program)
    if not program_path:
        raise EditorNotFoundError(program)

    command = [program_path, *args]
    logger.debug('Executing: %s', shlex.join(command))
    try:
        process = subprocess.Popen(command)
    except OSError as e:
        raise LaunchError(f'Failed to start {program}: {e}') from e

    previous_handler = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        returncode = process.wait()
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    if returncode < 0:
        returncode = 128 - returncode
    logger.debug('%s exited with status %d', program, returncode)
    return returncode
