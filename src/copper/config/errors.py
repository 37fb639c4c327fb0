"""Configuration error types."""

from ..errors import CopperError


class ProjectConfigError(CopperError):
    """Raised when copper.toml cannot be parsed or is missing required data."""

    pass


class ProjectNotFoundError(ProjectConfigError):
    """Raised when there is no copper.toml at the project location."""

    def __init__(self, location):
        self.location = location
        super().__init__(
            f"Copper project was not found at {location}. "
            + "Create a new one with 'copper init'"
        )


class ProjectExistsError(ProjectConfigError):
    """Raised when initializing a project over an existing copper.toml."""

    def __init__(self, file_path):
        self.file_path = file_path
        super().__init__(f"Copper project already exists: {file_path}")


class InvalidEnumValueError(ProjectConfigError):
    """Raised for an unknown language, compiler or unit type value."""

    def __init__(self, kind: str, value: str, allowed):
        self.kind = kind
        self.value = value
        super().__init__(
            f"Invalid {kind} value provided ('{value}'). "
            + f"Expected one of: {', '.join(allowed)}"
        )


class DuplicateUnitError(ProjectConfigError):
    """Raised when a unit name is declared more than once."""

    def __init__(self, unit_name: str):
        self.unit_name = unit_name
        super().__init__(f"Unit '{unit_name}' already exists in project")
