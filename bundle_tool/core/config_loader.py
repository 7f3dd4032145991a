"""Build configuration loading"""

import json
import logging
import os
import shlex
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import urlparse

import yaml
from dotenv import dotenv_values

from .path_resolver import PathResolver
from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_APP_HTML,
    DEFAULT_APP_INDEX,
    DEFAULT_BUILD_DIR,
    DEFAULT_BUNDLER_COMMAND,
    DEFAULT_BUNDLER_CONFIG,
    DEFAULT_PUBLIC_DIR,
    DOTENV_FILE,
    ENV_CI,
    ENV_NODE_ENV,
    ENV_PUBLIC_URL,
    NODE_ENV_PRODUCTION,
    PACKAGE_JSON_FILE,
    PROJECT_CONFIG_FILE,
    YARN_LOCK_FILE,
)
from ..models.config import AppManifest, AppPaths, BuildConfig, PackageManager

logger = logging.getLogger(__name__)

PATH_DEFAULTS = {
    'html': DEFAULT_APP_HTML,
    'index': DEFAULT_APP_INDEX,
    'public': DEFAULT_PUBLIC_DIR,
    'build': DEFAULT_BUILD_DIR,
    'bundler_config': DEFAULT_BUNDLER_CONFIG,
}


def load_build_config(project_root: Union[str, Path, None] = None,
                      environ: Optional[Mapping[str, str]] = None,
                      working_dir: Optional[Path] = None) -> BuildConfig:
    """Capture everything the build needs into an immutable record

    Args:
        project_root: Project directory (searched upwards from cwd if None)
        environ: Process environment (defaults to ``os.environ``)
        working_dir: Directory user-facing paths are printed relative to

    Returns:
        BuildConfig instance

    Raises:
        ConfigError: If the project file or package.json cannot be parsed
    """
    resolver = PathResolver(project_root)
    environ = dict(os.environ if environ is None else environ)

    settings = load_project_settings(resolver.project_root)
    paths = resolve_app_paths(resolver, settings.get('paths') or {})
    manifest = load_manifest(paths.app_package_json)
    environment = merge_environment(environ, paths.dotenv_file)

    public_url = environment.get(ENV_PUBLIC_URL) or manifest.homepage
    public_path = get_served_path(environment.get(ENV_PUBLIC_URL), manifest.homepage)

    package_manager = PackageManager.YARN if paths.yarn_lock_file.exists() else PackageManager.NPM

    config = BuildConfig(
        paths=paths,
        manifest=manifest,
        public_url=public_url,
        public_path=public_path,
        is_ci=is_ci_environment(environment),
        package_manager=package_manager,
        bundler_command=parse_bundler_command((settings.get('bundler') or {}).get('command')),
        environment=MappingProxyType(environment),
        working_dir=Path(working_dir or Path.cwd()).resolve()
    )

    logger.debug(f"Project root: {paths.project_root}")
    logger.debug(f"Public URL: {public_url or '<none>'}, served path: {public_path}")
    logger.debug(f"CI mode: {config.is_ci}, package manager: {package_manager.value}")

    return config


def load_project_settings(project_root: Path) -> Dict[str, Any]:
    """Load optional overrides from the project file

    Returns:
        Parsed settings, empty when the file does not exist
    """
    config_file = project_root / PROJECT_CONFIG_FILE

    if not config_file.exists():
        return {}

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load {PROJECT_CONFIG_FILE}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"{PROJECT_CONFIG_FILE} must contain a mapping")

    return data


def resolve_app_paths(resolver: PathResolver, overrides: Dict[str, str]) -> AppPaths:
    """Resolve application paths, applying overrides from the project file"""
    unknown = set(overrides) - set(PATH_DEFAULTS)
    if unknown:
        raise ConfigError(f"Unknown path keys in {PROJECT_CONFIG_FILE}: {', '.join(sorted(unknown))}")

    values = {key: resolver.resolve(overrides.get(key, default))
              for key, default in PATH_DEFAULTS.items()}
    root = resolver.project_root

    return AppPaths(
        project_root=root,
        app_html=values['html'],
        app_index=values['index'],
        app_public=values['public'],
        app_build=values['build'],
        app_package_json=root / PACKAGE_JSON_FILE,
        yarn_lock_file=root / YARN_LOCK_FILE,
        bundler_config=values['bundler_config'],
        dotenv_file=root / DOTENV_FILE
    )


def load_manifest(package_json: Path) -> AppManifest:
    """Read the homepage and scripts from package.json"""
    if not package_json.exists():
        logger.debug(f"{package_json} not found, using an empty manifest")
        return AppManifest()

    try:
        data = json.loads(package_json.read_text(encoding='utf-8'))
    except (OSError, ValueError) as e:
        raise ConfigError(f"Failed to read {package_json}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"{package_json} must contain a JSON object")

    return AppManifest.from_dict(data)


def merge_environment(environ: Mapping[str, str], dotenv_file: Path) -> Dict[str, str]:
    """Merge the .env file beneath the process environment

    Values already present in ``environ`` are never overridden by the file.
    ``NODE_ENV`` is always forced to production.
    """
    merged = {}

    if dotenv_file.exists():
        file_values = dotenv_values(dotenv_file)
        merged.update({key: value for key, value in file_values.items() if value is not None})
        logger.debug(f"Loaded {len(merged)} variable(s) from {dotenv_file}")

    merged.update(environ)
    merged[ENV_NODE_ENV] = NODE_ENV_PRODUCTION

    return merged


def is_ci_environment(environment: Mapping[str, str]) -> bool:
    value = environment.get(ENV_CI, "")
    return bool(value) and value.strip().lower() != "false"


def ensure_slash(path: str, needs_slash: bool = True) -> str:
    has_slash = path.endswith("/")
    if has_slash and not needs_slash:
        return path[:-1]
    if not has_slash and needs_slash:
        return f"{path}/"
    return path


def get_served_path(env_public_url: Optional[str], homepage: Optional[str]) -> str:
    """Path the app is served from, always ending with a slash

    ``PUBLIC_URL`` is used verbatim; otherwise only the path component of
    the manifest homepage counts.
    """
    if env_public_url:
        served = env_public_url
    elif homepage:
        served = urlparse(homepage).path or "/"
    else:
        served = "/"
    return ensure_slash(served, True)


def parse_bundler_command(command: Union[str, List[str], None]) -> List[str]:
    if command is None:
        return list(DEFAULT_BUNDLER_COMMAND)
    if isinstance(command, str):
        command = shlex.split(command)
    if not isinstance(command, list) or not command or not all(isinstance(part, str) for part in command):
        raise ConfigError("bundler.command must be a non-empty string or list of strings")
    return list(command)
