"""
Command-line interface for Copper.

This module provides the `copper` CLI tool for creating and building
C and C++ projects described by copper.toml.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from copper import __version__
from copper.build import BuildOrchestrator
from copper.cli_utils import ErrorFormatter, PathValidator, ProjectNameDetector
from copper.config import (
    ProjectCompiler,
    ProjectConfig,
    ProjectLanguage,
    UnitType,
    default_compiler,
)
from copper.errors import CopperError
from copper.toolchain import ToolchainRegistry


@dataclass
class InitArgs:
    """Arguments for the init command."""

    project_dir: Path
    location: Optional[Path] = None
    language: str = "c++"
    compiler: Optional[str] = None
    name: Optional[str] = None
    minimal: bool = False
    verbose: bool = False


@dataclass
class BuildArgs:
    """Arguments for the build command."""

    project_dir: Path
    units: List[str] = field(default_factory=list)
    verbose: bool = False


@dataclass
class NewUnitArgs:
    """Arguments for the new unit command."""

    project_dir: Path
    name: str
    source: Path
    unit_type: str = "binary"
    verbose: bool = False


def init_command(args: InitArgs) -> None:
    """Create a new Copper project.

    Examples:
        copper init                    # Project in the current directory
        copper init hello -l c         # C project in ./hello
        copper init -c clang -n demo   # Named project built with clang
        copper init --minimal          # Only write copper.toml
    """
    try:
        location = args.project_dir / args.location if args.location else args.project_dir
        language = ProjectLanguage.from_string(args.language)
        if args.compiler:
            compiler = ProjectCompiler.from_string(args.compiler)
        else:
            compiler = default_compiler(language)
        name = ProjectNameDetector.detect_name(location, args.name)

        if args.verbose:
            print(f"Creating project: {location}")
            print(f"Language: {language}")
            print(f"Compiler: {compiler}")
            print()

        project = ProjectConfig.initialize(
            location=location,
            name=name,
            language=language,
            compiler=compiler,
            generate_example=not args.minimal,
        )

        ErrorFormatter.print_success(f"Created project '{project.name}'")
        print(f"Project file: {ProjectConfig.file_path(location)}")

        if not ToolchainRegistry.is_available(compiler):
            ErrorFormatter.print_warning(
                f"Compiler '{compiler}' was not found on PATH, builds will fail until it is installed"
            )

        sys.exit(0)

    except CopperError as e:
        ErrorFormatter.handle_copper_error("Init failed!", e)
    except PermissionError as e:
        ErrorFormatter.handle_permission_error(e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)


def build_command(args: BuildArgs) -> None:
    """Build units of a Copper project.

    Examples:
        copper build                   # Build every unit
        copper build example tool      # Build 'example' then 'tool'
        copper --path demo build       # Build project in ./demo
        copper build --verbose         # Verbose output
    """
    # Print header
    print(f"Copper Build System v{__version__}")
    print()

    try:
        project = ProjectConfig.load(args.project_dir)
        orchestrator = BuildOrchestrator(verbose=args.verbose)

        # Show build start message
        if args.verbose:
            print(f"Building project: {project.name} ({args.project_dir})")
            print(f"Compiler: {project.compiler}")
            print()
        else:
            print(f"Building project: {project.name}...")

        result = orchestrator.build(project, args.units)

        ErrorFormatter.print_success("Build successful!")
        print()
        for unit in result.units:
            print(f"  {unit.name}: {unit.artifact_path}")
        print()
        print(f"Build time: {result.build_time:.2f}s")
        sys.exit(0)

    except CopperError as e:
        ErrorFormatter.handle_copper_error("Build failed!", e)
    except PermissionError as e:
        ErrorFormatter.handle_permission_error(e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)


def new_unit_command(args: NewUnitArgs) -> None:
    """Add a unit to a Copper project.

    Examples:
        copper new unit tool tools/src             # Binary unit
        copper new unit core lib -t static-library # Library unit
    """
    try:
        project = ProjectConfig.load(args.project_dir)
        unit_type = UnitType.from_string(args.unit_type)

        unit = project.add_unit(args.name, unit_type, args.source)
        file_path = project.save()

        ErrorFormatter.print_success(f"Added {unit.unit_type} unit '{unit.name}'")
        if args.verbose:
            print(f"Source: {unit.source}")
            print(f"Output directory: {unit.output_directory}")
            print(f"Intermediate directory: {unit.intermediate_directory}")
        print(f"Project file: {file_path}")
        sys.exit(0)

    except CopperError as e:
        ErrorFormatter.handle_copper_error("Adding unit failed!", e)
    except PermissionError as e:
        ErrorFormatter.handle_permission_error(e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)


def main() -> None:
    """Copper - Minimal C and C++ build configuration tool."""
    parser = argparse.ArgumentParser(
        prog="copper",
        description="Copper - Minimal C and C++ build configuration tool",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"copper {__version__}",
    )
    parser.add_argument(
        "--path",
        type=Path,
        default=Path.cwd(),
        help="Project directory (default: current directory)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Init command
    init_parser = subparsers.add_parser(
        "init",
        help="Create a new Copper project",
    )
    init_parser.add_argument(
        "location",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to create the project in, relative to --path (default: --path)",
    )
    init_parser.add_argument(
        "-l",
        "--lang",
        dest="language",
        default="c++",
        help=f"Project language: {', '.join(ProjectLanguage.str_variants())} (default: c++)",
    )
    init_parser.add_argument(
        "-c",
        "--compiler",
        default=None,
        help=f"Project compiler: {', '.join(ProjectCompiler.str_variants())} "
        + "(default: msvc on Windows, otherwise gcc for C and g++ for C++)",
    )
    init_parser.add_argument(
        "-n",
        "--name",
        default=None,
        help="Project name (default: directory name)",
    )
    init_parser.add_argument(
        "--minimal",
        action="store_true",
        help="Only write copper.toml, without the example layout and unit",
    )
    init_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )

    # Build command
    build_parser = subparsers.add_parser(
        "build",
        help="Build units of the project",
    )
    build_parser.add_argument(
        "units",
        nargs="*",
        help="Units to build, in order (default: all units)",
    )
    build_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose build output",
    )

    # New command
    new_parser = subparsers.add_parser(
        "new",
        help="Add a new component to the project",
    )
    new_subparsers = new_parser.add_subparsers(dest="component", help="Component to add")
    unit_parser = new_subparsers.add_parser(
        "unit",
        help="Add a new unit",
    )
    unit_parser.add_argument(
        "name",
        help="Unit name",
    )
    unit_parser.add_argument(
        "source",
        type=Path,
        help="Unit source directory, relative to the project directory",
    )
    unit_parser.add_argument(
        "-t",
        "--type",
        dest="unit_type",
        default="binary",
        help=f"Unit type: {', '.join(UnitType.str_variants())} (default: binary)",
    )
    unit_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )

    # Parse arguments
    parsed_args = parser.parse_args()

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)
    if parsed_args.command == "new" and not parsed_args.component:
        new_parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    # Validate project directory exists
    PathValidator.validate_project_dir(parsed_args.path)

    # Execute command
    if parsed_args.command == "init":
        init_args = InitArgs(
            project_dir=parsed_args.path,
            location=parsed_args.location,
            language=parsed_args.language,
            compiler=parsed_args.compiler,
            name=parsed_args.name,
            minimal=parsed_args.minimal,
            verbose=parsed_args.verbose,
        )
        init_command(init_args)
    elif parsed_args.command == "build":
        build_args = BuildArgs(
            project_dir=parsed_args.path,
            units=parsed_args.units,
            verbose=parsed_args.verbose,
        )
        build_command(build_args)
    elif parsed_args.command == "new":
        new_unit_args = NewUnitArgs(
            project_dir=parsed_args.path,
            name=parsed_args.name,
            source=parsed_args.source,
            unit_type=parsed_args.unit_type,
            verbose=parsed_args.verbose,
        )
        new_unit_command(new_unit_args)


if __name__ == "__main__":
    main()
