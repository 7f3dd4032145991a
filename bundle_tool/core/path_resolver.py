"""Path resolution module for bundle-tool"""

from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import ConfigError
from ..constants import PACKAGE_JSON_FILE, PROJECT_CONFIG_FILE


class PathResolver:
    """Resolves paths within a front-end project"""

    def __init__(self, project_root: Union[str, Path, None] = None):
        """Initialize path resolver

        Args:
            project_root: Root directory of the project. Defaults to the
                nearest ancestor of the working directory holding package.json
        """
        if project_root is None:
            project_root = self.find_project_root()
        self.project_root = Path(project_root).resolve()

    @staticmethod
    def find_project_root(start_path: Optional[Path] = None) -> Path:
        """Find the project root by looking for package.json

        Args:
            start_path: Starting directory (defaults to current directory)

        Returns:
            Project root path

        Raises:
            ConfigError: If no ancestor contains package.json
        """
        current = Path(start_path or Path.cwd()).resolve()

        for candidate in [current, *current.parents]:
            if (candidate / PACKAGE_JSON_FILE).is_file():
                return candidate
            if (candidate / PROJECT_CONFIG_FILE).is_file():
                return candidate

        raise ConfigError(f"No {PACKAGE_JSON_FILE} found in {current} or any parent directory")

    def resolve(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to project root

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Resolved absolute path
        """
        path = Path(path)

        if path.is_absolute():
            return path

        return (self.project_root / path).resolve()

    def make_relative(self, path: Union[str, Path], base: Optional[Path] = None) -> Path:
        """Make a path relative to project root (or to ``base``)

        Args:
            path: Path to make relative
            base: Directory to make the path relative to

        Returns:
            Relative path, or the absolute path when it lies outside ``base``
        """
        path = Path(path).resolve()
        base = Path(base).resolve() if base else self.project_root

        try:
            return path.relative_to(base)
        except ValueError:
            return path
