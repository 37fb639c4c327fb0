"""
Build orchestration for Copper projects.

This module coordinates building one or more units of a project:
- Selecting the requested units (or all of them)
- Resolving the project's toolchain
- Building each unit in turn with UnitBuilder
- Reporting per-unit artifacts and timing

Any failure stops the whole build: units after a failing or unknown unit
are not built.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Type

from ..config import ProjectConfig
from ..errors import CopperError
from ..toolchain import ToolchainRegistry
from .unit_builder import UnitBuilder, UnitBuildResult


class UnitNotFoundError(CopperError):
    """Raised when a requested unit does not exist in the project."""

    def __init__(self, unit_name: str, available: Iterable[str] = ()):
        self.unit_name = unit_name
        available = list(available)
        super().__init__(
            f"Unit '{unit_name}' was not found in project. "
            + f"Available units: {', '.join(available) or 'none'}"
        )


class NoUnitsError(CopperError):
    """Raised when there is nothing to build."""

    def __init__(self, project_name: str):
        self.project_name = project_name
        super().__init__(
            f"Project '{project_name}' has no units to build. "
            + "Add one with 'copper new unit'"
        )


@dataclass
class BuildResult:
    """Result of a complete build operation."""

    units: List[UnitBuildResult] = field(default_factory=list)
    build_time: float = 0.0

    @property
    def artifacts(self) -> List[Path]:
        return [unit.artifact_path for unit in self.units]


class BuildOrchestrator:
    """
    Orchestrates building the units of a Copper project.

    Example usage:
        orchestrator = BuildOrchestrator(verbose=True)
        project = ProjectConfig.load(Path("."))
        result = orchestrator.build(project, ["example"])
        for unit in result.units:
            print(f"{unit.name}: {unit.artifact_path}")
    """

    def __init__(
        self,
        verbose: bool = False,
        registry: Type[ToolchainRegistry] = ToolchainRegistry,
    ):
        """
        Initialize build orchestrator.

        Args:
            verbose: Enable verbose output
            registry: Toolchain registry to resolve the project compiler with
        """
        self.verbose = verbose
        self.registry = registry

    def build(
        self,
        project: ProjectConfig,
        unit_names: Optional[Iterable[str]] = None,
    ) -> BuildResult:
        """
        Build units of a project.

        Args:
            project: Loaded project
            unit_names: Names of the units to build (None or empty builds
                every unit of the project, in declaration order)

        Returns:
            BuildResult with one entry per built unit

        Raises:
            NoUnitsError: If there is nothing to build
            UnitNotFoundError: When a requested unit is reached that does
                not exist (units before it have already been built)
            ToolchainNotSupportedError: If the project toolchain cannot build
            CopperError: Any error raised while building a unit
        """
        start_time = time.time()

        names = list(unit_names) if unit_names else project.unit_names()
        if not names:
            raise NoUnitsError(project.name)

        toolchain = self.registry.resolve(project.compiler)
        builder = UnitBuilder(toolchain, verbose=self.verbose)

        logging.debug(f"Building {len(names)} unit(s) of '{project.name}' with {toolchain.name}")

        result = BuildResult()
        for index, name in enumerate(names, start=1):
            unit = project.get_unit(name)
            if unit is None:
                raise UnitNotFoundError(name, project.unit_names())

            if self.verbose:
                print(f"[{index}/{len(names)}] Building unit '{name}' ({unit.unit_type})...")

            unit_result = builder.build(project, unit)
            result.units.append(unit_result)

            if self.verbose:
                print(f"      Artifact: {unit_result.artifact_path}")

        result.build_time = time.time() - start_time
        return result

    def build_location(
        self,
        project_dir: Path,
        unit_names: Optional[Iterable[str]] = None,
    ) -> BuildResult:
        """Load the project at a location and build it.

        Raises:
            ProjectNotFoundError: If there is no copper.toml at project_dir
            ProjectConfigError: If copper.toml is invalid
        """
        project = ProjectConfig.load(Path(project_dir))
        return self.build(project, unit_names)
