"""Compiler toolchains for Copper.

This module turns toolchain-agnostic build requests into compiler command
lines and runs them.
"""

from .base import Toolchain
from .command import CommandResult, CompilerCommand, CompilerCommandFlags
from .errors import (
    DirectoryCreationError,
    PathNotFoundError,
    ToolchainError,
    ToolchainNotSupportedError,
)
from .executable_finder import find_executable
from .gcc import GCC_FLAGS, ClangToolchain, GCCFamilyToolchain, GCCToolchain, GPPToolchain
from .msvc import MSVC_FLAGS, MSVCToolchain
from .registry import ToolchainRegistry

__all__ = [
    "Toolchain",
    "ToolchainRegistry",
    "CompilerCommand",
    "CompilerCommandFlags",
    "CommandResult",
    "GCC_FLAGS",
    "MSVC_FLAGS",
    "GCCFamilyToolchain",
    "GCCToolchain",
    "GPPToolchain",
    "ClangToolchain",
    "MSVCToolchain",
    "find_executable",
    "ToolchainError",
    "ToolchainNotSupportedError",
    "PathNotFoundError",
    "DirectoryCreationError",
]
