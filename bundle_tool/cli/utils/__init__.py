"""CLI utility functions"""

from .output import console, print_error

__all__ = [
    'console',
    'print_error',
]
