"""
copper.toml project configuration.

This module owns the schema of a Copper project, loading and saving it from
the project file, and the mutations available on it (initialization and
adding units).

Example copper.toml:
    name = "hello"
    language = "c"
    compiler = "gcc"
    global-include-paths = ["include"]

    [[Unit]]
    name = "example"
    type = "binary"
    source = "src"
    output-directory = "build/bin"
    intermediate-directory = "build/obj"

Usage:
    project = ProjectConfig.load(Path("."))
    project.add_unit("tool", UnitType.BINARY, Path("tools/src"))
    project.save()
"""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import toml

from . import defaults
from .compiler import ProjectCompiler
from .errors import (
    DuplicateUnitError,
    ProjectConfigError,
    ProjectExistsError,
    ProjectNotFoundError,
)
from .language import ProjectLanguage
from .unit import UnitConfig, UnitType, expect_str, optional_path, optional_str, path_list

# copper.toml keys for the default directory layout, omitted when unchanged
_DIRECTORY_KEYS = {
    "default_build_directory": ("default-build-directory", defaults.BUILD_DIRECTORY),
    "default_binary_directory": ("default-binary-directory", defaults.BINARY_DIRECTORY),
    "default_library_directory": ("default-library-directory", defaults.LIBRARY_DIRECTORY),
    "default_object_directory": ("default-object-directory", defaults.OBJECT_DIRECTORY),
}


def default_compiler(language: ProjectLanguage) -> ProjectCompiler:
    """Get the compiler a new project uses when none is requested."""
    if sys.platform == "win32":
        return ProjectCompiler.MSVC
    if language is ProjectLanguage.C:
        return ProjectCompiler.GCC
    return ProjectCompiler.GPP


@dataclass
class ProjectConfig:
    """A Copper project as described by copper.toml.

    The project location is never read from or written to the file; it is
    supplied by whoever loads the project so that project files stay
    portable across checkouts.
    """

    name: str
    language: ProjectLanguage
    compiler: ProjectCompiler
    global_include_paths: List[Path] = field(default_factory=list)
    global_additional_compiler_args: Optional[str] = None
    default_build_directory: Path = defaults.BUILD_DIRECTORY
    default_binary_directory: Path = defaults.BINARY_DIRECTORY
    default_library_directory: Path = defaults.LIBRARY_DIRECTORY
    default_object_directory: Path = defaults.OBJECT_DIRECTORY
    units: List[UnitConfig] = field(default_factory=list)
    project_location: Path = field(default_factory=lambda: Path("."))

    @staticmethod
    def file_path(location: Path) -> Path:
        """Get the path of copper.toml for a project location."""
        return Path(location) / defaults.PROJECT_FILE_NAME

    @classmethod
    def load(cls, location: Path) -> "ProjectConfig":
        """
        Load the project stored at a location.

        Args:
            location: Project root directory containing copper.toml

        Returns:
            ProjectConfig whose project_location is `location`

        Raises:
            ProjectNotFoundError: If copper.toml does not exist
            ProjectConfigError: If copper.toml cannot be read or parsed
        """
        location = Path(location)
        file_path = cls.file_path(location)

        if not file_path.is_file():
            raise ProjectNotFoundError(location)

        try:
            data = toml.loads(file_path.read_text(encoding="utf-8"))
        except toml.TomlDecodeError as e:
            raise ProjectConfigError(f"Failed to parse {file_path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ProjectConfigError(f"Failed to decode {file_path} as UTF-8: {e}") from e
        except OSError as e:
            raise ProjectConfigError(f"Failed to read {file_path}: {e}") from e

        project = cls.from_dict(data)
        project.project_location = location
        logging.debug(f"Loaded project '{project.name}' from {file_path} ({len(project.units)} units)")
        return project

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectConfig":
        """Create a ProjectConfig from parsed copper.toml data.

        Raises:
            ProjectConfigError: If required fields are missing or malformed
            InvalidEnumValueError: If an enumeration value is unknown
        """
        missing = [key for key in ("name", "language", "compiler") if key not in data]
        if missing:
            raise ProjectConfigError(
                f"Project is missing required fields: {', '.join(missing)}"
            )

        unit_tables = data.get("Unit", [])
        if not isinstance(unit_tables, list):
            raise ProjectConfigError("'Unit' must be an array of tables ([[Unit]])")

        directories = {}
        for attribute, (key, default) in _DIRECTORY_KEYS.items():
            directories[attribute] = optional_path(data, key) or default

        project = cls(
            name=expect_str(data, "name"),
            language=ProjectLanguage.from_string(expect_str(data, "language")),
            compiler=ProjectCompiler.from_string(expect_str(data, "compiler")),
            global_include_paths=path_list(data, "global-include-paths"),
            global_additional_compiler_args=optional_str(data, "global-additional-compiler-args"),
            **directories,
        )

        for table in unit_tables:
            unit = UnitConfig.from_dict(table)
            if project.has_unit(unit.name):
                raise DuplicateUnitError(unit.name)
            project.units.append(unit)

        return project

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the copper.toml layout.

        Fields equal to their declared defaults are omitted to keep
        hand-edited files minimal.
        """
        data: Dict[str, Any] = {
            "name": self.name,
            "language": self.language.value,
            "compiler": self.compiler.value,
        }
        if self.global_include_paths:
            data["global-include-paths"] = [path.as_posix() for path in self.global_include_paths]
        if self.global_additional_compiler_args:
            data["global-additional-compiler-args"] = self.global_additional_compiler_args

        for attribute, (key, default) in _DIRECTORY_KEYS.items():
            value: Path = getattr(self, attribute)
            if value != default:
                data[key] = value.as_posix()

        if self.units:
            data["Unit"] = [unit.to_dict() for unit in self.units]
        return data

    def save(self, location: Optional[Path] = None) -> Path:
        """
        Write the project to copper.toml, replacing the existing file.

        Args:
            location: Project root to save to (defaults to project_location)

        Returns:
            Path to the written copper.toml

        Raises:
            ProjectConfigError: If the file cannot be written
        """
        file_path = self.file_path(location if location is not None else self.project_location)

        try:
            file_path.write_text(toml.dumps(self.to_dict()), encoding="utf-8")
        except OSError as e:
            raise ProjectConfigError(f"Failed to write {file_path}: {e}") from e

        logging.debug(f"Saved project '{self.name}' to {file_path}")
        return file_path

    @classmethod
    def initialize(
        cls,
        location: Path,
        name: str,
        language: ProjectLanguage,
        compiler: Optional[ProjectCompiler] = None,
        generate_example: bool = True,
    ) -> "ProjectConfig":
        """
        Create a new project and its copper.toml.

        With generate_example, the example layout is created on disk
        (src/, include/ and the default binary and object directories),
        include/ becomes a global include path and an example binary unit
        building src/ is added.

        Args:
            location: Directory to create the project in (created if missing)
            name: Project name
            language: Project language
            compiler: Compiler to use (defaults to the platform default)
            generate_example: Whether to generate the example layout

        Returns:
            The new ProjectConfig

        Raises:
            ProjectExistsError: If copper.toml already exists at location
            ProjectConfigError: If the project files cannot be created
        """
        location = Path(location)
        file_path = cls.file_path(location)
        if file_path.exists():
            raise ProjectExistsError(file_path)

        project = cls(
            name=name,
            language=language,
            compiler=compiler or default_compiler(language),
            project_location=location,
        )

        try:
            location.mkdir(parents=True, exist_ok=True)

            if generate_example:
                build_dir = project.default_build_directory
                for directory in (
                    defaults.SOURCE_DIRECTORY,
                    defaults.INCLUDE_DIRECTORY,
                    build_dir / project.default_binary_directory,
                    build_dir / project.default_object_directory,
                ):
                    (location / directory).mkdir(parents=True, exist_ok=True)

                project.global_include_paths = [defaults.INCLUDE_DIRECTORY]
                project.add_unit(defaults.EXAMPLE_UNIT_NAME, UnitType.BINARY, defaults.SOURCE_DIRECTORY)
        except OSError as e:
            raise ProjectConfigError(f"Failed to create project layout in {location}: {e}") from e

        project.save(location)
        return project

    def default_output_directory(self, unit_type: UnitType) -> Path:
        """Output directory for a unit type, relative to the project root."""
        if unit_type.is_library:
            return self.default_build_directory / self.default_library_directory
        return self.default_build_directory / self.default_binary_directory

    def default_intermediate_directory(self) -> Path:
        """Object file directory for all units, relative to the project root."""
        return self.default_build_directory / self.default_object_directory

    def add_unit(self, name: str, unit_type: UnitType, source: Path) -> UnitConfig:
        """
        Add a unit with directories derived from the project defaults.

        Args:
            name: Unit name
            unit_type: Type of the unit
            source: Unit source directory, relative to the project root

        Returns:
            The new UnitConfig

        Raises:
            DuplicateUnitError: If a unit with the same name already exists
        """
        if self.has_unit(name):
            raise DuplicateUnitError(name)

        unit = UnitConfig(
            name=name,
            unit_type=unit_type,
            source=Path(source),
            output_directory=self.default_output_directory(unit_type),
            intermediate_directory=self.default_intermediate_directory(),
        )
        self.units.append(unit)
        return unit

    def get_unit(self, name: str) -> Optional[UnitConfig]:
        """Get a unit by name, or None if the project has no such unit."""
        for unit in self.units:
            if unit.name == name:
                return unit
        return None

    def has_unit(self, name: str) -> bool:
        return self.get_unit(name) is not None

    def unit_names(self) -> List[str]:
        return [unit.name for unit in self.units]
