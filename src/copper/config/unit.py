"""
Unit configuration.

A unit is a named, independently buildable artifact (binary or library)
declared inside copper.toml as a [[Unit]] table:

    [[Unit]]
    name = "example"
    type = "binary"
    source = "src"
    output-directory = "build/bin"
    intermediate-directory = "build/obj"
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import InvalidEnumValueError, ProjectConfigError


class UnitType(Enum):
    """Kind of artifact a unit produces."""

    BINARY = "binary"
    STATIC_LIBRARY = "static-library"
    DYNAMIC_LIBRARY = "dynamic-library"

    @property
    def is_library(self) -> bool:
        return self is not UnitType.BINARY

    @classmethod
    def str_variants(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def from_string(cls, value: str) -> "UnitType":
        """Parse a unit type name (case-insensitive).

        Raises:
            InvalidEnumValueError: If the value names no known unit type
        """
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidEnumValueError("unit type", value, cls.str_variants())

    def __str__(self) -> str:
        return self.value


@dataclass
class UnitConfig:
    """Configuration of a single project unit.

    Attributes:
        name: Unit name, unique within the project
        unit_type: Type of artifact produced
        source: Source directory, relative to the project root
        output_directory: Artifact directory override (None derives it from
            the project defaults and the unit type)
        intermediate_directory: Object file directory override (None derives
            it from the project defaults)
        include_paths: Unit scoped include paths, relative to the project root
        additional_compiler_args: Extra compiler arguments, split on whitespace
    """

    name: str
    unit_type: UnitType
    source: Path
    output_directory: Optional[Path] = None
    intermediate_directory: Optional[Path] = None
    include_paths: List[Path] = field(default_factory=list)
    additional_compiler_args: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the copper.toml table layout, omitting unset fields."""
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.unit_type.value,
            "source": self.source.as_posix(),
        }
        if self.output_directory is not None:
            data["output-directory"] = self.output_directory.as_posix()
        if self.intermediate_directory is not None:
            data["intermediate-directory"] = self.intermediate_directory.as_posix()
        if self.include_paths:
            data["include-paths"] = [path.as_posix() for path in self.include_paths]
        if self.additional_compiler_args:
            data["additional-compiler-args"] = self.additional_compiler_args
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UnitConfig":
        """Create a UnitConfig from a parsed [[Unit]] table.

        Raises:
            ProjectConfigError: If a required field is missing or malformed
            InvalidEnumValueError: If the unit type is unknown
        """
        if not isinstance(data, dict):
            raise ProjectConfigError(f"Unit entry must be a table, got: {data!r}")

        missing = [key for key in ("name", "type", "source") if key not in data]
        if missing:
            unit_name = data.get("name", "<unnamed>")
            raise ProjectConfigError(
                f"Unit '{unit_name}' is missing required fields: {', '.join(missing)}"
            )

        return cls(
            name=expect_str(data, "name"),
            unit_type=UnitType.from_string(expect_str(data, "type")),
            source=Path(expect_str(data, "source")),
            output_directory=optional_path(data, "output-directory"),
            intermediate_directory=optional_path(data, "intermediate-directory"),
            include_paths=path_list(data, "include-paths"),
            additional_compiler_args=optional_str(data, "additional-compiler-args"),
        )


def expect_str(data: Dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise ProjectConfigError(f"Field '{key}' must be a string, got: {value!r}")
    return value


def optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    if key not in data:
        return None
    return expect_str(data, key)


def optional_path(data: Dict[str, Any], key: str) -> Optional[Path]:
    value = optional_str(data, key)
    return Path(value) if value is not None else None


def path_list(data: Dict[str, Any], key: str) -> List[Path]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ProjectConfigError(f"Field '{key}' must be a list of paths, got: {value!r}")
    return [Path(item) for item in value]
