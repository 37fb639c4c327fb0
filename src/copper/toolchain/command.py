"""Compiler Command.

This module assembles and runs a single compiler or linker invocation.

Design:
    - Each CompilerCommand is built up one argument group at a time using the
      toolchain's flag spellings (CompilerCommandFlags)
    - Every path argument is validated when it is added, not when the
      process runs
    - execute() runs exactly one blocking process and returns its exit status
      together with the combined stdout/stderr; deciding whether a failure is
      a compile or a link error is left to the caller
"""

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from .errors import DirectoryCreationError, PathNotFoundError, ToolchainError


@dataclass(frozen=True)
class CompilerCommandFlags:
    """Flag spellings of a toolchain.

    Attributes:
        output: Flag preceding the output file (e.g., '-o')
        compile: Compile-only flag preceding the source file (e.g., '-c')
        include_directory: Flag preceding an include directory (e.g., '-I')
        language: Flag preceding a language override (e.g., '-x')
    """

    output: str
    compile: str
    include_directory: str
    language: str


@dataclass
class CommandResult:
    """Result of running a compiler command."""

    returncode: int
    output: str
    command: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CompilerCommand:
    """
    Builder for one compiler process invocation.

    Typical usage:
        command = CompilerCommand("gcc", GCC_FLAGS, project_root)
        command.add_include_path(Path("include"))
        command.compile_only()
        command.add_input(source)
        command.set_output(object_file)
        result = command.execute()
    """

    def __init__(self, executable: str, flags: CompilerCommandFlags, root: Path):
        """
        Initialize compiler command.

        Args:
            executable: Compiler executable name or path
            flags: Flag spellings for the toolchain
            root: Working directory for the process; relative include paths
                are resolved against it
        """
        self.executable = executable
        self.flags = flags
        self.root = Path(root)
        self._arguments: List[str] = []

    @property
    def arguments(self) -> List[str]:
        """Arguments collected so far (without the executable)."""
        return list(self._arguments)

    def command_line(self) -> List[str]:
        """Full argument vector, executable first."""
        return [self.executable] + self._arguments

    def add_include_path(self, include_path: Path) -> "CompilerCommand":
        """
        Add an include directory.

        Raises:
            PathNotFoundError: If the directory does not exist
        """
        include_path = self.root / include_path
        if not include_path.exists():
            raise PathNotFoundError("include path", include_path)

        self._arguments.extend([self.flags.include_directory, str(include_path)])
        return self

    def add_include_paths(self, include_paths: Iterable[Path]) -> "CompilerCommand":
        for include_path in include_paths:
            self.add_include_path(include_path)
        return self

    def set_language(self, language: str) -> "CompilerCommand":
        """Force the source language instead of guessing it from the extension."""
        self._arguments.extend([self.flags.language, language])
        return self

    def compile_only(self) -> "CompilerCommand":
        """Compile to an object file without linking."""
        self._arguments.append(self.flags.compile)
        return self

    def add_arguments(self, arguments: Iterable[str]) -> "CompilerCommand":
        """Append free-form arguments (e.g., user supplied compiler args)."""
        self._arguments.extend(arguments)
        return self

    def add_input(self, input_file: Path) -> "CompilerCommand":
        """
        Add an input file (source or object file).

        Raises:
            PathNotFoundError: If the file does not exist
        """
        input_file = Path(input_file)
        if not input_file.exists():
            raise PathNotFoundError("input file", input_file)

        self._arguments.append(str(input_file))
        return self

    def add_inputs(self, input_files: Iterable[Path]) -> "CompilerCommand":
        for input_file in input_files:
            self.add_input(input_file)
        return self

    def set_output(self, output_file: Path) -> "CompilerCommand":
        """
        Set the output file, creating its directory if needed.

        Raises:
            DirectoryCreationError: If the output directory cannot be created
        """
        output_file = Path(output_file)
        output_dir = output_file.parent

        if not output_dir.exists():
            try:
                output_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise DirectoryCreationError(output_dir, str(e)) from e

        self._arguments.extend([self.flags.output, str(output_file)])
        return self

    def execute(self, verbose: bool = False) -> CommandResult:
        """
        Run the command and wait for it to finish.

        There is no timeout: a hung compiler blocks the caller.

        Returns:
            CommandResult with exit status and combined stdout/stderr
            (decoded as UTF-8, undecodable bytes replaced)

        Raises:
            ToolchainError: If the process cannot be started
        """
        cmd = self.command_line()
        logging.debug(f"Running: {' '.join(cmd)}")
        if verbose:
            print(f"      $ {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                cwd=self.root,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise ToolchainError(f"Unable to spawn compiler process '{self.executable}': {e}") from e

        return CommandResult(
            returncode=result.returncode,
            output=result.stdout or "",
            command=cmd,
        )
