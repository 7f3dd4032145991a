# bundle_tool/models/__init__.py
"""Data models for bundle-tool"""

from .config import AppPaths, AppManifest, BuildConfig, HostingTarget, PackageManager
from .build import AssetInfo, BuildStats, CompileKind, CompileResult, FileSizeSnapshot
from .diagnostic import DiagnosticEntry, SourceLocation

__all__ = [
    # Config models
    "AppPaths",
    "AppManifest",
    "BuildConfig",
    "HostingTarget",
    "PackageManager",

    # Build models
    "AssetInfo",
    "BuildStats",
    "CompileKind",
    "CompileResult",
    "FileSizeSnapshot",

    # Diagnostic models
    "DiagnosticEntry",
    "SourceLocation",
]
