"""Target information resolution.

Turns a unit's configuration into the fully resolved, absolute set of inputs
needed to build it. Directory overrides left unset are derived from the
project defaults here, once, before any build step runs. Nothing is cached:
every build resolves its targets again.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from ..config import ProjectConfig, ProjectLanguage, UnitConfig, UnitType
from ..errors import CopperError
from .source_scanner import SourceScanner


class UnitTypeNotSupportedError(CopperError):
    """Raised when building a unit type Copper cannot produce yet."""

    def __init__(self, unit_name: str, unit_type: UnitType):
        self.unit_name = unit_name
        self.unit_type = unit_type
        super().__init__(f"Unit '{unit_name}': building '{unit_type}' units is not supported yet")


@dataclass(frozen=True)
class TargetInformation:
    """Resolved build inputs for one unit.

    All paths are absolute.
    """

    name: str
    unit_type: UnitType
    language: ProjectLanguage
    root: Path
    source_files: Tuple[Path, ...]
    output_directory: Path
    intermediate_directory: Path
    include_paths: Tuple[Path, ...]
    extra_args: Tuple[str, ...]

    @property
    def artifact_path(self) -> Path:
        """Path of the linked artifact."""
        return self.output_directory / artifact_file_name(self.name, self.unit_type)

    def object_file_for(self, source: Path) -> Path:
        """Object file produced for a source file (always a .o extension)."""
        return self.intermediate_directory / f"{Path(source).stem}.o"


def artifact_file_name(unit_name: str, unit_type: UnitType) -> str:
    """
    Get the file name of a unit's artifact on this host.

    Raises:
        UnitTypeNotSupportedError: For library unit types
    """
    if unit_type is not UnitType.BINARY:
        raise UnitTypeNotSupportedError(unit_name, unit_type)
    if sys.platform == "win32":
        return f"{unit_name}.exe"
    return unit_name


def split_args(args: Optional[str]) -> List[str]:
    """Split an additional-compiler-args string on whitespace."""
    if not args:
        return []
    return args.split()


def resolve_target_information(project: ProjectConfig, unit: UnitConfig) -> TargetInformation:
    """
    Resolve everything needed to build a unit.

    Args:
        project: Project owning the unit
        unit: Unit to resolve

    Returns:
        TargetInformation with absolute paths

    Raises:
        UnitTypeNotSupportedError: If the unit type cannot be built
        SourceDirectoryError: If the unit's source directory is unreadable
        NoSourceFilesError: If the unit has no source files
    """
    # Fail before touching the filesystem for types that cannot be linked
    artifact_file_name(unit.name, unit.unit_type)

    root = Path(project.project_location).absolute()

    scanner = SourceScanner(project.language.extensions)
    source_files = scanner.scan(root / unit.source, unit.name)

    output_directory = unit.output_directory
    if output_directory is None:
        output_directory = project.default_output_directory(unit.unit_type)

    intermediate_directory = unit.intermediate_directory
    if intermediate_directory is None:
        intermediate_directory = project.default_intermediate_directory()

    include_paths = [root / path for path in project.global_include_paths]
    include_paths += [root / path for path in unit.include_paths]

    extra_args = split_args(project.global_additional_compiler_args)
    extra_args += split_args(unit.additional_compiler_args)

    target = TargetInformation(
        name=unit.name,
        unit_type=unit.unit_type,
        language=project.language,
        root=root,
        source_files=tuple(source_files),
        output_directory=root / output_directory,
        intermediate_directory=root / intermediate_directory,
        include_paths=tuple(include_paths),
        extra_args=tuple(extra_args),
    )

    logging.debug(
        f"Resolved unit '{unit.name}': {len(source_files)} sources, "
        + f"output={target.output_directory}, intermediate={target.intermediate_directory}"
    )
    return target
