"""Prerequisite checks for workspace setup."""

import shutil
from typing import Callable, Dict, Iterable, Optional

from .errors import PrerequisiteError

INSTALL_HINTS: Dict[str, str] = {
    "code": (
        "VS Code 'code' command not found in PATH. Please install it and ensure it's "
        "in your PATH. See the VS Code documentation for command line setup on your OS."
    ),
}


def check_prerequisites(
    commands: Iterable[str],
    which: Callable[[str], Optional[str]] = shutil.which,
) -> None:
    """
    Verify that every command is available on PATH.

    Args:
        commands: Executable names to look up.
        which: Lookup function (``shutil.which`` by default).

    Raises:
        PrerequisiteError: For the first command that cannot be found.
    """
    for command in commands:
        if which(command) is None:
            raise PrerequisiteError(
                INSTALL_HINTS.get(command, f"Required command '{command}' not found in PATH.")
            )
