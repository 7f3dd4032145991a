"""Preflight checks run before anything touches the build directory"""

import logging
from pathlib import Path
from typing import Iterable, List

from rich.console import Console
from rich.markup import escape

from ..api.exceptions import MissingRequiredFileError
from ..utils.file_utils import is_readable_file

logger = logging.getLogger(__name__)


def find_missing_files(files: Iterable[Path]) -> List[Path]:
    """Return the files that do not exist or cannot be read"""
    return [Path(file_path) for file_path in files if not is_readable_file(Path(file_path))]


def check_required_files(files: Iterable[Path], console: Console) -> bool:
    """Report every missing required file

    Args:
        files: Files that must exist
        console: Console to print to

    Returns:
        True when all files are present
    """
    missing = find_missing_files(files)

    for file_path in missing:
        console.print("[red]Could not find a required file.[/red]")
        console.print(f"[red]  Name: [/red][cyan]{escape(file_path.name)}[/cyan]")
        console.print(f"[red]  Searched in: [/red][cyan]{escape(str(file_path.parent))}[/cyan]")

    return not missing


def ensure_required_files(files: Iterable[Path], console: Console) -> None:
    """Raise MissingRequiredFileError if any required file is missing"""
    files = list(files)
    if not check_required_files(files, console):
        missing = find_missing_files(files)
        logger.debug(f"Preflight failed, missing: {missing}")
        raise MissingRequiredFileError(missing)
