# bundle_tool/cli/commands/__init__.py
"""CLI commands"""

from . import build

__all__ = [
    "build",
]
