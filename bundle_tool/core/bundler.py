# bundle_tool/core/bundler.py
"""Bundler backends"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..api.exceptions import BundlerError
from ..models.build import CompileResult
from ..models.config import BuildConfig

logger = logging.getLogger(__name__)


class Bundler(ABC):
    """Abstract base class for bundler backends"""

    @abstractmethod
    async def compile(self, config: BuildConfig) -> CompileResult:
        """
        Run one production compilation

        Args:
            config: Build configuration

        Returns:
            CompileResult describing the outcome. Failures to run the
            bundler are reported as a hard error, never raised.
        """
        pass


class WebpackBundler(Bundler):
    """Runs the webpack CLI and reads its JSON stats from stdout"""

    def build_command(self, config: BuildConfig) -> List[str]:
        return [
            *config.bundler_command,
            "--config", str(config.paths.bundler_config),
            "--json",
        ]

    async def compile(self, config: BuildConfig) -> CompileResult:
        command = self.build_command(config)
        logger.debug(f"Running bundler: {' '.join(command)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=str(config.paths.project_root),
                env=dict(config.environment),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
        except OSError as e:
            return CompileResult.hard_error(
                BundlerError(f"Could not start bundler '{command[0]}': {e}", e)
            )

        stdout, stderr = await process.communicate()
        logger.debug(f"Bundler exited with code {process.returncode}")

        try:
            data = parse_stats(stdout.decode("utf-8", errors="replace"))
        except ValueError as e:
            detail = stderr.decode("utf-8", errors="replace").strip()
            message = detail or f"Bundler exited with code {process.returncode} without reporting stats"
            return CompileResult.hard_error(BundlerError(message, e))

        return CompileResult.from_stats(data)


def parse_stats(output: str) -> Dict[str, Any]:
    """Extract the stats document from bundler output

    The first JSON object that decodes is used. Text around it (banners,
    notices, trailing logs) is ignored. Multi-compiler stats are flattened
    into one document.

    Raises:
        ValueError: If no JSON object can be found
    """
    decoder = json.JSONDecoder()
    start = output.find("{")

    while start >= 0:
        try:
            data, _ = decoder.raw_decode(output, start)
        except ValueError:
            start = output.find("{", start + 1)
            continue
        break
    else:
        raise ValueError("No JSON stats in bundler output")

    children = data.get("children")
    if children and not data.get("assets"):
        return merge_child_stats(data, children)

    return data


def merge_child_stats(data: Dict[str, Any], children: List[Dict[str, Any]]) -> Dict[str, Any]:
    merged = dict(data)
    for key in ("assets", "errors", "warnings"):
        items = list(data.get(key) or [])
        for child in children:
            for item in child.get(key) or []:
                if item not in items:
                    items.append(item)
        merged[key] = items
    return merged
