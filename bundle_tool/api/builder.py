"""Builder API for production builds"""

from pathlib import Path
from typing import Mapping, Optional, Union

from rich.console import Console

from ..core.bundler import Bundler
from ..core.config_loader import load_build_config
from ..services.build_service import BuildReport, BuildService
from ..utils.async_utils import run_async


def build(project_root: Union[str, Path, None] = None,
          bundler: Optional[Bundler] = None,
          console: Optional[Console] = None,
          environ: Optional[Mapping[str, str]] = None) -> BuildReport:
    """
    Create a production build (convenience function)

    Args:
        project_root: Project directory (searched upwards from cwd if None)
        bundler: Bundler backend, webpack CLI by default
        console: Console for output
        environ: Environment to use instead of ``os.environ``

    Returns:
        BuildReport: Result of the successful build

    Raises:
        BundleToolError: On any terminal build condition
    """
    config = load_build_config(project_root, environ=environ)
    service = BuildService(config, bundler=bundler, console=console)
    return run_async(service.run())
