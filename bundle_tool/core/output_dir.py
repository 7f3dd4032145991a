"""Output directory management"""

import logging
import shutil
from pathlib import Path
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


def reset_directory(directory: Path) -> None:
    """Remove all contents of ``directory`` but keep the directory itself

    A shell sitting inside the build directory keeps a valid cwd. The
    directory is created if it does not exist.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    for entry in directory.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()

    logger.debug(f"Emptied {directory}")


def _exclude_file(exclude: Optional[Path]) -> Callable[[str, List[str]], List[str]]:
    target = Path(exclude).resolve() if exclude else None

    def ignore(directory: str, names: List[str]) -> List[str]:
        if target is None:
            return []
        return [name for name in names if (Path(directory) / name).resolve() == target]

    return ignore


def copy_assets(source: Path, destination: Path, exclude: Optional[Path] = None) -> None:
    """Recursively copy ``source`` into ``destination``

    Symbolic links are followed and their targets copied. The file whose
    resolved path equals ``exclude`` is skipped. Existing files in
    ``destination`` are overwritten, so repeated copies converge.

    Args:
        source: Directory to copy from
        destination: Directory to merge into (created if missing)
        exclude: File never to copy
    """
    source = Path(source)
    destination = Path(destination)

    if not source.is_dir():
        logger.debug(f"No public directory at {source}, nothing to copy")
        destination.mkdir(parents=True, exist_ok=True)
        return

    shutil.copytree(
        source,
        destination,
        symlinks=False,
        ignore=_exclude_file(exclude),
        dirs_exist_ok=True
    )

    logger.debug(f"Copied {source} into {destination}")
