"""
GCC family toolchains.

gcc, g++ and clang share the same driver conventions:
    gcc -I <dir> [-x <lang>] [args...] -c <source> -o <object>
    gcc <objects...> [args...] -o <artifact>
"""

from pathlib import Path
from typing import Optional, Sequence

from ..config import ProjectLanguage
from .base import Toolchain
from .command import CommandResult, CompilerCommandFlags

GCC_FLAGS = CompilerCommandFlags(
    output="-o",
    compile="-c",
    include_directory="-I",
    language="-x",
)


class GCCFamilyToolchain(Toolchain):
    """Toolchain driven by a GCC compatible compiler driver.

    Sources are compiled in the project language: when it differs from the
    driver's own language an explicit -x override is passed, so gcc and
    clang compile every source of a C++ project as C++. Linking is left to
    the driver; gcc and clang do not add the C++ runtime library, so C++
    projects built with them need it in additional-compiler-args (e.g.
    -lstdc++) or should select g++.
    """

    flags = GCC_FLAGS

    # Language the driver compiles .c sources as
    driver_language: Optional[ProjectLanguage] = None

    def language_override(self, language: ProjectLanguage) -> Optional[str]:
        if self.driver_language is None or language is self.driver_language:
            return None
        return language.value

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
        command = self.new_command(root)
        command.add_include_paths(include_paths)

        if language is not None:
            override = self.language_override(language)
            if override:
                command.set_language(override)

        command.add_arguments(extra_args)
        command.compile_only()
        command.add_input(source)
        command.set_output(object_file)
        return command.execute(verbose=verbose)

    def link(
        self,
        object_files: Sequence[Path],
        output_file: Path,
        root: Path,
        extra_args: Sequence[str] = (),
        verbose: bool = False,
    ) -> CommandResult:
        command = self.new_command(root)
        command.add_inputs(object_files)
        command.add_arguments(extra_args)
        command.set_output(output_file)
        return command.execute(verbose=verbose)


class GCCToolchain(GCCFamilyToolchain):
    name = "gcc"
    executable_name = "gcc"
    driver_language = ProjectLanguage.C


class GPPToolchain(GCCFamilyToolchain):
    name = "g++"
    executable_name = "g++"
    driver_language = ProjectLanguage.CPP


class ClangToolchain(GCCFamilyToolchain):
    name = "clang"
    executable_name = "clang"
    driver_language = ProjectLanguage.C
