# bundle_tool/utils/__init__.py
"""Utility functions for bundle-tool"""

from .file_utils import (
    is_readable_file,
    scan_directory,
    to_posix_relative,
    read_bytes,
    gzip_size,
)

from .formatting import (
    format_size,
    format_size_delta,
    format_duration,
    pad_left,
)

from .async_utils import run_async, run_in_chunks

__all__ = [
    # File utilities
    'is_readable_file',
    'scan_directory',
    'to_posix_relative',
    'read_bytes',
    'gzip_size',

    # Formatting utilities
    'format_size',
    'format_size_delta',
    'format_duration',
    'pad_left',

    # Async utilities
    'run_async',
    'run_in_chunks',
]
