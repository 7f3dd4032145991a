# bundle_tool/api/__init__.py
"""API layer for bundle-tool"""

from .exceptions import (
    BundleToolError,
    MissingRequiredFileError,
    BuildError,
    BundlerError,
    CompileError,
    WarningsAsErrorsError,
    ConfigError,
)
from .builder import build

__all__ = [
    # Convenience functions
    "build",

    # Exceptions
    "BundleToolError",
    "MissingRequiredFileError",
    "BuildError",
    "BundlerError",
    "CompileError",
    "WarningsAsErrorsError",
    "ConfigError",
]
