"""
Unit build driver.

Builds one unit: resolves its target information, compiles every source
file to an object file (one compiler process per file) and links the
objects into the unit's artifact (one more process).
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..config import ProjectConfig, UnitConfig
from ..errors import CopperError
from ..toolchain import CommandResult, Toolchain
from .target_info import TargetInformation, resolve_target_information


class CompileError(CopperError):
    """Raised when the compiler exits with a non-zero status."""

    def __init__(self, unit_name: str, source: Path, result: CommandResult):
        self.unit_name = unit_name
        self.source = source
        self.returncode = result.returncode
        self.output = result.output
        self.command = result.command
        super().__init__(
            f"Unit '{unit_name}': compilation of {source} failed "
            + f"(exit status {result.returncode})\n{result.output}"
        )


class LinkError(CopperError):
    """Raised when the linker exits with a non-zero status."""

    def __init__(self, unit_name: str, output_file: Path, result: CommandResult):
        self.unit_name = unit_name
        self.output_file = output_file
        self.returncode = result.returncode
        self.output = result.output
        self.command = result.command
        super().__init__(
            f"Unit '{unit_name}': linking {output_file} failed "
            + f"(exit status {result.returncode})\n{result.output}"
        )


@dataclass
class UnitBuildResult:
    """Result of building one unit."""

    name: str
    artifact_path: Path
    object_files: List[Path]
    build_time: float


class UnitBuilder:
    """
    Compiles and links a single unit with a toolchain.

    The build is strictly sequential and fail-fast: the first source that
    fails to compile aborts the unit and nothing is linked.
    """

    def __init__(self, toolchain: Toolchain, verbose: bool = False):
        """
        Initialize unit builder.

        Args:
            toolchain: Toolchain to compile and link with
            verbose: Print progress and command lines
        """
        self.toolchain = toolchain
        self.verbose = verbose

    def build(self, project: ProjectConfig, unit: UnitConfig) -> UnitBuildResult:
        """
        Resolve and build a unit of a project.

        Raises:
            UnitTypeNotSupportedError: If the unit type cannot be built
            SourceDirectoryError: If the source directory is unreadable
            NoSourceFilesError: If the unit has no source files
            PathNotFoundError: If an include path or input file is missing
            CompileError: If a source file fails to compile
            LinkError: If linking fails
        """
        target = resolve_target_information(project, unit)
        return self.build_target(target)

    def build_target(self, target: TargetInformation) -> UnitBuildResult:
        """Compile and link already resolved target information."""
        start_time = time.time()

        if self.verbose:
            print(f"      Sources: {len(target.source_files)} files")

        object_files = self.compile_sources(target)
        artifact_path = self.link_objects(target, object_files)

        return UnitBuildResult(
            name=target.name,
            artifact_path=artifact_path,
            object_files=object_files,
            build_time=time.time() - start_time,
        )

    def compile_sources(self, target: TargetInformation) -> List[Path]:
        """
        Compile every source file of a target, in order.

        Returns:
            List of object files, in source order

        Raises:
            CompileError: On the first source that fails to compile
        """
        object_files = []

        for source in target.source_files:
            object_file = target.object_file_for(source)

            if self.verbose:
                print(f"      Compiling {source.name}...")

            result = self.toolchain.compile(
                source,
                object_file,
                target.root,
                include_paths=target.include_paths,
                language=target.language,
                extra_args=target.extra_args,
                verbose=self.verbose,
            )

            if not result.success:
                raise CompileError(target.name, source, result)

            object_files.append(object_file)

        return object_files

    def link_objects(self, target: TargetInformation, object_files: List[Path]) -> Path:
        """
        Link object files into the target's artifact.

        Raises:
            LinkError: If the linker fails
        """
        artifact_path = target.artifact_path

        if self.verbose:
            print(f"      Linking {artifact_path.name}...")

        result = self.toolchain.link(
            object_files,
            artifact_path,
            target.root,
            extra_args=target.extra_args,
            verbose=self.verbose,
        )

        if not result.success:
            raise LinkError(target.name, artifact_path, result)

        return artifact_path
