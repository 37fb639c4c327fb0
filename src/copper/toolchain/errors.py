"""Toolchain error types."""

from pathlib import Path

from ..errors import CopperError


class ToolchainError(CopperError):
    """Raised when a toolchain process cannot be run."""

    pass


class ToolchainNotSupportedError(ToolchainError):
    """Raised when a project selects a toolchain Copper cannot build with."""

    def __init__(self, toolchain_name: str):
        self.toolchain_name = toolchain_name
        super().__init__(f"Building with the '{toolchain_name}' toolchain is not supported yet")


class PathNotFoundError(CopperError):
    """Raised when a file or directory passed to a compiler command is missing."""

    def __init__(self, kind: str, path: Path):
        self.kind = kind
        self.path = path
        super().__init__(f"{kind.capitalize()} '{path}' does not exist")


class DirectoryCreationError(CopperError):
    """Raised when an output directory cannot be created."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Unable to create directory '{path}': {reason}")
