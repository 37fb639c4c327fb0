"""
Build system components for Copper.

This module provides the build system implementation including:
- Source file discovery
- Target information resolution
- Per-unit compilation and linking
- Build orchestration
"""

from .orchestrator import BuildOrchestrator, BuildResult, NoUnitsError, UnitNotFoundError
from .source_scanner import NoSourceFilesError, SourceDirectoryError, SourceScanner
from .target_info import (
    TargetInformation,
    UnitTypeNotSupportedError,
    resolve_target_information,
)
from .unit_builder import CompileError, LinkError, UnitBuilder, UnitBuildResult

__all__ = [
    "SourceScanner",
    "SourceDirectoryError",
    "NoSourceFilesError",
    "TargetInformation",
    "UnitTypeNotSupportedError",
    "resolve_target_information",
    "UnitBuilder",
    "UnitBuildResult",
    "CompileError",
    "LinkError",
    "BuildOrchestrator",
    "BuildResult",
    "UnitNotFoundError",
    "NoUnitsError",
]
