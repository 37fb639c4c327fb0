"""
Source file discovery.

This module finds the source files of a unit: every file below the unit's
source directory whose extension belongs to the project language.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List

from ..errors import CopperError


class SourceDirectoryError(CopperError):
    """Raised when a unit's source directory is missing or unreadable."""

    def __init__(self, directory: Path, reason: str):
        self.directory = directory
        super().__init__(f"Unable to read source directory '{directory}': {reason}")


class NoSourceFilesError(CopperError):
    """Raised when a unit's source directory contains no source files."""

    def __init__(self, directory: Path, extensions: Iterable[str], unit_name: str = ""):
        self.directory = directory
        self.unit_name = unit_name
        self.extensions = tuple(extensions)
        prefix = f"Unit '{unit_name}': " if unit_name else ""
        wanted = ", ".join(f".{ext}" for ext in self.extensions)
        super().__init__(f"{prefix}no source files ({wanted}) found in {directory}")


class SourceScanner:
    """
    Scans a directory tree for source files.

    Extensions are matched exactly and case-sensitively against the file
    suffix ('c' matches main.c but not main.C or main.cc).
    """

    def __init__(self, extensions: Iterable[str]):
        """
        Initialize source scanner.

        Args:
            extensions: Accepted extensions without the dot (e.g., ['c', 'cpp'])
        """
        self.extensions = tuple(extensions)

    def scan(self, directory: Path, unit_name: str = "") -> List[Path]:
        """
        Find all matching files below a directory.

        Args:
            directory: Directory to scan recursively
            unit_name: Unit being scanned (for error messages)

        Returns:
            Sorted list of absolute source file paths

        Raises:
            SourceDirectoryError: If the directory is missing or unreadable
            NoSourceFilesError: If no matching file was found
        """
        directory = Path(directory).absolute()

        if not directory.exists():
            raise SourceDirectoryError(directory, "directory does not exist")
        if not directory.is_dir():
            raise SourceDirectoryError(directory, "not a directory")

        sources = []
        for entry in self._walk(directory):
            if entry.suffix[1:] in self.extensions:
                sources.append(entry)

        if not sources:
            raise NoSourceFilesError(directory, self.extensions, unit_name)

        sources.sort()
        logging.debug(f"Found {len(sources)} source files in {directory}")
        return sources

    def _walk(self, directory: Path) -> List[Path]:
        """List every file below a directory.

        Raises:
            SourceDirectoryError: If a directory cannot be read
        """
        files = []

        def on_error(error: OSError) -> None:
            raise SourceDirectoryError(Path(error.filename or directory), error.strerror or str(error))

        for dirpath, _dirnames, filenames in os.walk(directory, onerror=on_error):
            for filename in filenames:
                files.append(Path(dirpath) / filename)

        return files
