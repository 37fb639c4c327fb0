"""Toolchain registry.

Maps each ProjectCompiler selection to its Toolchain implementation. New
toolchains are added by registering another Toolchain subclass.
"""

from typing import Dict, Optional, Type

from ..config import ProjectCompiler
from .base import Toolchain
from .errors import ToolchainNotSupportedError
from .gcc import ClangToolchain, GCCToolchain, GPPToolchain
from .msvc import MSVCToolchain


class ToolchainRegistry:
    """Lookup of toolchains by project compiler selection."""

    _toolchains: Dict[ProjectCompiler, Type[Toolchain]] = {
        ProjectCompiler.GCC: GCCToolchain,
        ProjectCompiler.GPP: GPPToolchain,
        ProjectCompiler.CLANG: ClangToolchain,
        ProjectCompiler.MSVC: MSVCToolchain,
    }

    @classmethod
    def register(cls, compiler: ProjectCompiler, toolchain_class: Type[Toolchain]) -> None:
        cls._toolchains[compiler] = toolchain_class

    @classmethod
    def get(cls, compiler: ProjectCompiler) -> Toolchain:
        """Get the toolchain for a selection, whether or not it can build."""
        try:
            toolchain_class = cls._toolchains[compiler]
        except KeyError:
            raise ToolchainNotSupportedError(str(compiler))
        return toolchain_class()

    @classmethod
    def resolve(cls, compiler: ProjectCompiler) -> Toolchain:
        """
        Get the toolchain used to build with a selection.

        Raises:
            ToolchainNotSupportedError: If the toolchain cannot build units
        """
        toolchain = cls.get(compiler)
        if not toolchain.supported:
            raise ToolchainNotSupportedError(toolchain.name)
        return toolchain

    @classmethod
    def is_available(cls, compiler: ProjectCompiler, search_path: Optional[str] = None) -> bool:
        """Check whether the selected toolchain's executables are on PATH."""
        return cls.get(compiler).is_available(search_path)
