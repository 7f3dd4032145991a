"""Bundle Tool - production build orchestration for front-end applications.

Runs the bundler once, reports compile diagnostics with source context,
prints gzip size changes and deployment guidance, and merges the public
assets into the build directory.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core API
from .api import build

# Exceptions
from .api.exceptions import (
    BundleToolError,
    MissingRequiredFileError,
    BuildError,
    BundlerError,
    CompileError,
    WarningsAsErrorsError,
    ConfigError,
)

# Data models
from .models import (
    BuildConfig,
    CompileResult,
    DiagnosticEntry,
    FileSizeSnapshot,
    HostingTarget,
)

# Services
from .services import BuildService, BuildReport

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Core API functions
    "build",

    # Exceptions
    "BundleToolError",
    "MissingRequiredFileError",
    "BuildError",
    "BundlerError",
    "CompileError",
    "WarningsAsErrorsError",
    "ConfigError",

    # Data models
    "BuildConfig",
    "CompileResult",
    "DiagnosticEntry",
    "FileSizeSnapshot",
    "HostingTarget",

    # Services
    "BuildService",
    "BuildReport",
]
