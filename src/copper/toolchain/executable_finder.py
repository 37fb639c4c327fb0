"""Executable lookup on the process search path.

Only checks that a file with the executable's name exists in one of the
PATH directories; it does not try to run it.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional


def executable_file_name(executable_name: str) -> str:
    """Get the on-disk file name of an executable for the host platform."""
    if sys.platform == "win32" and not executable_name.lower().endswith(".exe"):
        return f"{executable_name}.exe"
    return executable_name


def find_executable(executable_name: str, search_path: Optional[str] = None) -> Optional[Path]:
    """
    Search PATH for an executable.

    Args:
        executable_name: Executable name without platform suffix (e.g., 'gcc')
        search_path: PATH-style directory list (defaults to the PATH variable)

    Returns:
        Path to the first matching file, or None if not found
    """
    if search_path is None:
        search_path = os.environ.get("PATH", "")

    file_name = executable_file_name(executable_name)

    for directory in search_path.split(os.pathsep):
        if not directory:
            continue
        candidate = Path(directory) / file_name
        if candidate.is_file():
            logging.debug(f"Found {executable_name} at {candidate}")
            return candidate

    logging.debug(f"{executable_name} not found on PATH")
    return None
