"""Abstract base class for toolchains.

This module defines the interface every toolchain family implements so the
unit builder can compile and link without knowing which compiler is used:
- GCC family (gcc, g++, clang)
- MSVC (cl + link, availability probing only)
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence

from ..config import ProjectLanguage
from .command import CommandResult, CompilerCommand, CompilerCommandFlags
from .executable_finder import find_executable


class Toolchain(ABC):
    """Interface for a compiler toolchain.

    Subclasses set the class attributes below and implement compile() and
    link(). A toolchain is registered in ToolchainRegistry under its
    ProjectCompiler value.
    """

    # Human readable toolchain name (e.g., 'gcc')
    name: str = ""

    # Compiler driver executable, without platform suffix
    executable_name: str = ""

    # Flag spellings used to build command lines
    flags: CompilerCommandFlags

    # Whether Copper can build with this toolchain
    supported: bool = True

    def required_executables(self) -> List[str]:
        """Executables that must be on PATH for the toolchain to be usable."""
        return [self.executable_name]

    def is_available(self, search_path: Optional[str] = None) -> bool:
        """Check whether every required executable is on PATH.

        This is advisory: a found executable is not guaranteed to work.
        """
        return all(
            find_executable(executable, search_path) is not None
            for executable in self.required_executables()
        )

    def language_override(self, language: ProjectLanguage) -> Optional[str]:
        """Language override to pass when compiling sources of a project language.

        Returns:
            Value for the language flag, or None to let the driver infer the
            language from the file extension
        """
        return None

    def new_command(self, root: Path) -> CompilerCommand:
        """Start a new command for this toolchain."""
        return CompilerCommand(self.executable_name, self.flags, root)

    @abstractmethod
    def compile(
        self,
        source: Path,
        object_file: Path,
        root: Path,
        include_paths: Sequence[Path] = (),
        language: Optional[ProjectLanguage] = None,
        extra_args: Sequence[str] = (),
        verbose: bool = False,
    ) -> CommandResult:
        """Compile one source file into one object file.

        Args:
            source: Source file to compile
            object_file: Object file to produce
            root: Project root (process working directory)
            include_paths: Include directories
            language: Project language, used to decide on a language override
            extra_args: Additional compiler arguments
            verbose: Print the command line before running it

        Returns:
            CommandResult of the compiler process

        Raises:
            PathNotFoundError: If the source or an include path is missing
            ToolchainError: If the compiler cannot be started
        """
        pass

    @abstractmethod
    def link(
        self,
        object_files: Sequence[Path],
        output_file: Path,
        root: Path,
        extra_args: Sequence[str] = (),
        verbose: bool = False,
    ) -> CommandResult:
        """Link object files into the final artifact.

        Args:
            object_files: Object files to link
            output_file: Artifact to produce
            root: Project root (process working directory)
            extra_args: Additional compiler arguments
            verbose: Print the command line before running it

        Returns:
            CommandResult of the linker process

        Raises:
            PathNotFoundError: If an object file is missing
            ToolchainError: If the linker cannot be started
        """
        pass
