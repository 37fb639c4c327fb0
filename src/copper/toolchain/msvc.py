"""
Microsoft Visual C++ toolchain.

MSVC is recognised and probed for availability, but compiling and linking
with it is not implemented: cl.exe attaches values directly to its flags
(/Fo<file>) and needs a separate link.exe step for libraries.
"""

import sys
from pathlib import Path
from typing import List, Optional, Sequence

from ..config import ProjectLanguage
from .base import Toolchain
from .command import CommandResult, CompilerCommandFlags
from .errors import ToolchainNotSupportedError

MSVC_FLAGS = CompilerCommandFlags(
    output="/Fo",
    compile="/c",
    include_directory="/I",
    language="/T",
)


class MSVCToolchain(Toolchain):
    name = "msvc"
    executable_name = "cl"
    flags = MSVC_FLAGS
    supported = False

    def required_executables(self) -> List[str]:
        # link.exe is needed to produce libraries
        return ["cl", "link"]

    def is_available(self, search_path: Optional[str] = None) -> bool:
        if sys.platform != "win32":
            return False
        return super().is_available(search_path)

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
        raise ToolchainNotSupportedError(self.name)

    def link(
        self,
        object_files: Sequence[Path],
        output_file: Path,
        root: Path,
        extra_args: Sequence[str] = (),
        verbose: bool = False,
    ) -> CommandResult:
        raise ToolchainNotSupportedError(self.name)
