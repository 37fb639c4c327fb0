"""Project language selection."""

from enum import Enum
from typing import List, Tuple

from .errors import InvalidEnumValueError


class ProjectLanguage(Enum):
    """Language of a Copper project.

    The value is the spelling used in copper.toml.
    """

    C = "c"
    CPP = "c++"

    @property
    def extensions(self) -> Tuple[str, ...]:
        """Source file extensions (without the dot) compiled for this language."""
        if self is ProjectLanguage.C:
            return ("c",)
        return ("c", "cpp")

    @classmethod
    def str_variants(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def from_string(cls, value: str) -> "ProjectLanguage":
        """Parse a language name (case-insensitive).

        Raises:
            InvalidEnumValueError: If the value names no known language
        """
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidEnumValueError("language", value, cls.str_variants())

    def __str__(self) -> str:
        return self.value
