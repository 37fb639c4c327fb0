"""Base exception for Copper.

Every error raised by the configuration, toolchain and build layers derives
from CopperError so the CLI can report any of them the same way.
"""


class CopperError(Exception):
    """Base class for all Copper errors."""

    pass
