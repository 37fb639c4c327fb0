"""Default values for Copper project configuration."""

from pathlib import Path

# Name of the project file, always located at the project root
PROJECT_FILE_NAME = "copper.toml"

BUILD_DIRECTORY = Path("build")
BINARY_DIRECTORY = Path("bin")
LIBRARY_DIRECTORY = Path("lib")
OBJECT_DIRECTORY = Path("obj")

# Layout created by `copper init` when an example project is requested
SOURCE_DIRECTORY = Path("src")
INCLUDE_DIRECTORY = Path("include")
EXAMPLE_UNIT_NAME = "example"
