# bundle_tool/utils/file_utils.py
"""File operation utilities"""

import gzip
import os
from pathlib import Path
from typing import Iterable, List, Optional

import aiofiles

from ..constants import GZIP_LEVEL


def is_readable_file(file_path: Path) -> bool:
    """
    Check that a path is an existing, readable file

    Args:
        file_path: Path to check

    Returns:
        True if the file exists and can be read
    """
    return file_path.is_file() and os.access(file_path, os.R_OK)


def scan_directory(directory: Path,
                   extensions: Optional[Iterable[str]] = None) -> List[Path]:
    """
    Recursively list files in a directory

    Args:
        directory: Directory to scan (a missing directory yields nothing)
        extensions: Only include files with these suffixes

    Returns:
        Sorted list of file paths
    """
    if not directory.is_dir():
        return []

    suffixes = tuple(ext.lower() for ext in extensions) if extensions else None
    files = []

    for path in directory.rglob('*'):
        if not path.is_file():
            continue
        if suffixes and path.suffix.lower() not in suffixes:
            continue
        files.append(path)

    return sorted(files)


def to_posix_relative(file_path: Path, directory: Path) -> str:
    """
    Get a forward-slash path relative to ``directory``

    Args:
        file_path: File path
        directory: Base directory

    Returns:
        Relative path string
    """
    try:
        rel_path = file_path.relative_to(directory)
    except ValueError:
        return str(file_path).replace(os.sep, '/')
    return str(rel_path).replace(os.sep, '/')


async def read_bytes(file_path: Path) -> bytes:
    """Read a whole file without blocking the event loop"""
    async with aiofiles.open(file_path, 'rb') as f:
        return await f.read()


async def gzip_size(file_path: Path, level: int = GZIP_LEVEL) -> int:
    """
    Size of a file after gzip compression

    Args:
        file_path: Path to file
        level: Compression level

    Returns:
        Compressed size in bytes
    """
    content = await read_bytes(file_path)
    return len(gzip.compress(content, compresslevel=level))
