"""Project configuration modules for Copper."""

from .compiler import ProjectCompiler
from .defaults import PROJECT_FILE_NAME
from .errors import (
    DuplicateUnitError,
    InvalidEnumValueError,
    ProjectConfigError,
    ProjectExistsError,
    ProjectNotFoundError,
)
from .language import ProjectLanguage
from .project import ProjectConfig, default_compiler
from .unit import UnitConfig, UnitType

__all__ = [
    "PROJECT_FILE_NAME",
    "ProjectConfig",
    "ProjectLanguage",
    "ProjectCompiler",
    "UnitConfig",
    "UnitType",
    "default_compiler",
    "ProjectConfigError",
    "ProjectNotFoundError",
    "ProjectExistsError",
    "InvalidEnumValueError",
    "DuplicateUnitError",
]
