"""Core functionality for bundle-tool"""

from .path_resolver import PathResolver
from .config_loader import load_build_config
from .bundler import Bundler, WebpackBundler
from .diagnostics import format_diagnostics, print_diagnostics, print_errors
from .output_dir import copy_assets, reset_directory
from .preflight import check_required_files, ensure_required_files

__all__ = [
    "PathResolver",
    "load_build_config",
    "Bundler",
    "WebpackBundler",
    "format_diagnostics",
    "print_diagnostics",
    "print_errors",
    "copy_assets",
    "reset_directory",
    "check_required_files",
    "ensure_required_files",
]
