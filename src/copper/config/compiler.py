"""Project compiler (toolchain) selection."""

from enum import Enum
from typing import List

from .errors import InvalidEnumValueError


class ProjectCompiler(Enum):
    """Compiler family selected for a Copper project."""

    GCC = "gcc"
    GPP = "g++"
    CLANG = "clang"
    MSVC = "msvc"

    @classmethod
    def str_variants(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def from_string(cls, value: str) -> "ProjectCompiler":
        """Parse a compiler name (case-insensitive, accepts gpp and cl aliases).

        Raises:
            InvalidEnumValueError: If the value names no known compiler
        """
        normalized = str(value).strip().lower()
        aliases = {"gpp": "g++", "cl": "msvc"}
        normalized = aliases.get(normalized, normalized)
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidEnumValueError("compiler", value, cls.str_variants())

    def __str__(self) -> str:
        return self.value
