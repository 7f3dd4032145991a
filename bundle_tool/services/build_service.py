# bundle_tool/services/build_service.py
"""Production build workflow"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from rich.console import Console

from .deployment_advisor import DeploymentAdvice, advise, print_advice
from .size_reporter import AssetSize, measure_file_sizes_before_build, print_file_sizes_after_build
from ..api.exceptions import BundlerError, CompileError, WarningsAsErrorsError
from ..constants import MSG_COMPILED, MSG_CREATING_BUILD, MSG_FAILED_TO_COMPILE, MSG_WARNINGS_AS_ERRORS
from ..core.bundler import Bundler, WebpackBundler
from ..core.diagnostics import print_errors
from ..core.output_dir import copy_assets, reset_directory
from ..core.preflight import ensure_required_files
from ..models.build import CompileKind, CompileResult, FileSizeSnapshot
from ..models.config import BuildConfig
from ..models.diagnostic import DiagnosticEntry
from ..utils.formatting import format_duration

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class BuildReport:
    """What a successful build produced"""

    compile_result: CompileResult
    assets: List[AssetSize] = field(default_factory=list)
    advice: Optional[DeploymentAdvice] = None
    duration: float = 0.0


class BuildService:
    """Runs preflight, build, reporting and asset copy for one project"""

    def __init__(self,
                 config: BuildConfig,
                 bundler: Optional[Bundler] = None,
                 console: Optional[Console] = None):
        """
        Initialize build service

        Args:
            config: Immutable build configuration
            bundler: Bundler backend (webpack CLI by default)
            console: Console for user-facing output
        """
        self.config = config
        self.bundler = bundler or WebpackBundler()
        self.console = console or Console()

    async def run(self) -> BuildReport:
        """
        Execute the full workflow

        Returns:
            BuildReport for the successful build

        Raises:
            MissingRequiredFileError: An entry file is missing
            BundlerError: The bundler could not run
            CompileError: The compilation reported errors
            WarningsAsErrorsError: Warnings were reported in CI mode
        """
        paths = self.config.paths

        # 1. Warn and stop if required files are missing
        ensure_required_files(paths.required_files, self.console)

        # 2. Read current file sizes so the change can be shown later
        previous_sizes = await measure_file_sizes_before_build(paths.app_build)

        # 3. Empty the build directory, keeping the directory itself
        reset_directory(paths.app_build)

        # 4. Compile and report
        report = await self.build(previous_sizes)

        # 5. Merge with the public folder
        copy_assets(paths.app_public, paths.app_build, exclude=paths.app_html)

        return report

    async def build(self, previous_sizes: FileSizeSnapshot) -> BuildReport:
        """Run the bundler once and print the outcome"""
        self.console.print(f"{MSG_CREATING_BUILD} {datetime.now().strftime(TIMESTAMP_FORMAT)}")

        start_time = time.time()
        with self.console.status("Compiling..."):
            result = await self.bundler.compile(self.config)
        duration = time.time() - start_time

        self.check_result(result)

        self.console.print(
            f"[green]{MSG_COMPILED}[/green] {datetime.now().strftime(TIMESTAMP_FORMAT)} "
            f"[dim]({format_duration(duration)})[/dim]"
        )
        self.console.print()

        if result.warnings:
            logger.warning(f"Compiled with {len(result.warnings)} warning(s)")

        self.console.print("File sizes after gzip:")
        self.console.print()
        assets = await print_file_sizes_after_build(
            result.stats, previous_sizes, self.config.paths.app_build, self.console
        )
        self.console.print()

        advice = advise(self.config)
        print_advice(advice, self.console)

        return BuildReport(compile_result=result, assets=assets, advice=advice, duration=duration)

    def check_result(self, result: CompileResult) -> None:
        """Print diagnostics and raise for every failing outcome

        Errors are checked before warnings are escalated in CI mode.
        """
        if result.kind == CompileKind.HARD_ERROR:
            print_errors(MSG_FAILED_TO_COMPILE, [DiagnosticEntry.from_exception(result.cause)], self.console)
            raise BundlerError(str(result.cause), result.cause)

        if result.errors:
            print_errors(MSG_FAILED_TO_COMPILE, result.errors, self.console)
            raise CompileError(len(result.errors))

        if self.config.is_ci and result.warnings:
            print_errors(MSG_WARNINGS_AS_ERRORS, result.warnings, self.console)
            raise WarningsAsErrorsError(len(result.warnings))
