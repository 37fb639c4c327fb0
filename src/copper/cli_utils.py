"""CLI utility functions for Copper.

This module provides common utilities used across CLI commands including:
- Project name detection
- Error handling and formatting
- Project path validation
"""

import sys
from pathlib import Path
from typing import Optional

from copper.build import CompileError, LinkError
from copper.config import ProjectNotFoundError
from copper.errors import CopperError


class ProjectNameDetector:
    """Derives project names for new projects."""

    @staticmethod
    def detect_name(location: Path, name: Optional[str] = None) -> str:
        """Detect or validate the name of a new project.

        Args:
            location: Directory the project is created in
            name: Optional explicit project name

        Returns:
            Project name to use

        Raises:
            CopperError: If no name can be derived from location
        """
        if name:
            return name

        # Derive the name from the project directory
        detected_name = Path(location).absolute().name
        if not detected_name:
            raise CopperError(f"Unable to derive a project name from {location}, use --name")

        return detected_name


class ErrorFormatter:
    """Formats and displays error messages with ANSI color codes."""

    # ANSI color codes
    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(title: str, message: str) -> None:
        """Print formatted error message.

        Args:
            title: Error title (e.g., "Build failed")
            message: Error message details
        """
        print()
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}")
        print()
        print(message)
        print()

    @staticmethod
    def print_success(message: str) -> None:
        """Print formatted success message.

        Args:
            message: Success message
        """
        print()
        print(f"{ErrorFormatter.GREEN}✓ {message}{ErrorFormatter.RESET}")

    @staticmethod
    def print_warning(message: str) -> None:
        """Print formatted warning message.

        Args:
            message: Warning message
        """
        print()
        print(f"{ErrorFormatter.YELLOW}✗ {message}{ErrorFormatter.RESET}")

    @staticmethod
    def handle_copper_error(title: str, error: CopperError) -> None:
        """Handle any CopperError with standard formatting.

        Toolchain failures also show the command line that was run.

        Args:
            title: Error title (e.g., "Build failed!")
            error: The CopperError to handle
        """
        ErrorFormatter.print_error(title, str(error))

        if isinstance(error, (CompileError, LinkError)) and error.command:
            print(f"Command: {' '.join(error.command)}")
        if isinstance(error, ProjectNotFoundError):
            print("Make sure you're in a Copper project directory with a copper.toml file.")

        sys.exit(1)

    @staticmethod
    def handle_permission_error(error: PermissionError) -> None:
        """Handle PermissionError with standard formatting.

        Args:
            error: The PermissionError to handle
        """
        ErrorFormatter.print_error("Error: Permission denied", str(error))
        sys.exit(1)

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        """Handle KeyboardInterrupt with standard formatting."""
        ErrorFormatter.print_warning("Interrupted")
        sys.exit(130)  # Standard exit code for SIGINT

    @staticmethod
    def handle_unexpected_error(error: Exception, verbose: bool = False) -> None:
        """Handle unexpected errors with standard formatting.

        Args:
            error: The exception to handle
            verbose: Whether to print traceback
        """
        message = f"{type(error).__name__}: {error}"
        ErrorFormatter.print_error("Unexpected error", message)

        if verbose:
            import traceback

            print("Traceback:")
            print(traceback.format_exc())

        sys.exit(1)


class PathValidator:
    """Validates project paths and directories."""

    @staticmethod
    def validate_project_dir(project_dir: Path) -> None:
        """Validate that project directory exists and is a directory.

        Args:
            project_dir: Path to validate

        Raises:
            SystemExit: If path doesn't exist or isn't a directory
        """
        if not project_dir.exists():
            print(
                f"{ErrorFormatter.RED}✗ Error: Path does not exist: {project_dir}{ErrorFormatter.RESET}"
            )
            sys.exit(2)
        if not project_dir.is_dir():
            print(
                f"{ErrorFormatter.RED}✗ Error: Path is not a directory: {project_dir}{ErrorFormatter.RESET}"
            )
            sys.exit(2)
