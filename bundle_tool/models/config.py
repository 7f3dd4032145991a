"""Configuration data models"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Any, Mapping

from ..constants import GITHUB_PAGES_MARKER


class PackageManager(Enum):
    """Command prefix convention used in printed instructions"""
    NPM = "npm"
    YARN = "yarn"

    def install_dev(self, package: str) -> str:
        if self is PackageManager.YARN:
            return f"add --dev {package}"
        return f"install --save-dev {package}"

    def install_global(self, package: str) -> str:
        if self is PackageManager.YARN:
            return f"global add {package}"
        return f"install -g {package}"


class HostingTarget(Enum):
    """Where the build output is expected to be served from"""
    GITHUB_PAGES = "github_pages"
    CUSTOM_SUBPATH = "custom_subpath"
    EXPLICIT_ROOT = "explicit_root"
    IMPLICIT_ROOT = "implicit_root"

    @classmethod
    def classify(cls, public_url: Optional[str], public_path: str) -> 'HostingTarget':
        """Classify the hosting target from the public URL and served path"""
        if public_url and GITHUB_PAGES_MARKER in public_url:
            return cls.GITHUB_PAGES
        if public_path != "/":
            return cls.CUSTOM_SUBPATH
        if public_url:
            return cls.EXPLICIT_ROOT
        return cls.IMPLICIT_ROOT


@dataclass(frozen=True)
class AppPaths:
    """Resolved filesystem locations of the application"""

    project_root: Path
    app_html: Path
    app_index: Path
    app_public: Path
    app_build: Path
    app_package_json: Path
    yarn_lock_file: Path
    bundler_config: Path
    dotenv_file: Path

    @property
    def required_files(self) -> List[Path]:
        """Files that must exist before a build can start"""
        return [self.app_html, self.app_index]


@dataclass(frozen=True)
class AppManifest:
    """The fields of package.json the build cares about"""

    name: Optional[str] = None
    homepage: Optional[str] = None
    scripts: Dict[str, str] = field(default_factory=dict)

    @property
    def has_deploy_script(self) -> bool:
        return "deploy" in self.scripts

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppManifest':
        """Create from parsed package.json content"""
        scripts = data.get("scripts") or {}
        return cls(
            name=data.get("name"),
            homepage=data.get("homepage") or None,
            scripts=dict(scripts)
        )


@dataclass(frozen=True)
class BuildConfig:
    """Immutable configuration captured once at process start

    Every component receives this record instead of reading the process
    environment.
    """

    paths: AppPaths
    manifest: AppManifest
    public_url: Optional[str]
    public_path: str
    is_ci: bool
    package_manager: PackageManager
    bundler_command: List[str]
    environment: Mapping[str, str] = field(default_factory=dict)
    working_dir: Optional[Path] = None

    @property
    def hosting_target(self) -> HostingTarget:
        return HostingTarget.classify(self.public_url, self.public_path)
