# bundle_tool/services/size_reporter.py
"""Gzip size snapshots and before/after reporting"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from ..constants import FIFTY_KILOBYTES, FILE_NAME_HASH_PATTERN, GZIP_CONCURRENCY, SIZE_REPORT_EXTENSIONS
from ..models.build import BuildStats, FileSizeSnapshot
from ..utils.async_utils import run_in_chunks
from ..utils.file_utils import gzip_size, scan_directory, to_posix_relative
from ..utils.formatting import format_size, format_size_delta

logger = logging.getLogger(__name__)

NEW_FILE_LABEL = "(new)"


@dataclass
class AssetSize:
    """Gzip size of one emitted asset compared to the previous build"""

    name: str
    size: int
    previous_size: Optional[int] = None

    @property
    def is_new(self) -> bool:
        return self.previous_size is None

    @property
    def difference(self) -> int:
        if self.previous_size is None:
            return self.size
        return self.size - self.previous_size


def remove_file_name_hash(name: str) -> str:
    """Strip the content hash so renamed builds of one file compare

    ``static/js/main.1a2b3c4d.js`` becomes ``static/js/main.js``.
    """
    name = name.replace("\\", "/")
    return FILE_NAME_HASH_PATTERN.sub(lambda match: match.group(1) + match.group(4), name)


async def measure_file_sizes_before_build(build_dir: Path) -> FileSizeSnapshot:
    """Measure gzip sizes of the scripts and stylesheets already in ``build_dir``

    A missing directory produces an empty snapshot.
    """
    build_dir = Path(build_dir)
    files = scan_directory(build_dir, SIZE_REPORT_EXTENSIONS)
    sizes = await run_in_chunks(files, gzip_size, GZIP_CONCURRENCY)

    snapshot = FileSizeSnapshot(root=build_dir)
    for file_path, size in zip(files, sizes):
        snapshot.sizes[remove_file_name_hash(to_posix_relative(file_path, build_dir))] = size

    logger.debug(f"Measured {len(snapshot)} file(s) in {build_dir}")
    return snapshot


async def collect_asset_sizes(stats: BuildStats,
                              previous: FileSizeSnapshot,
                              build_dir: Path) -> List[AssetSize]:
    """Gzip sizes of emitted scripts and stylesheets, largest first

    Files present only in ``previous`` are not reported.
    """
    build_dir = Path(build_dir)
    assets = [asset for asset in stats.assets
              if asset.name.lower().endswith(SIZE_REPORT_EXTENSIONS)
              and (build_dir / asset.name).is_file()]

    sizes = await run_in_chunks([build_dir / asset.name for asset in assets], gzip_size, GZIP_CONCURRENCY)

    results = [
        AssetSize(
            name=asset.name,
            size=size,
            previous_size=previous.get(remove_file_name_hash(asset.name))
        )
        for asset, size in zip(assets, sizes)
    ]
    results.sort(key=lambda item: item.size, reverse=True)
    return results


def difference_label(asset: AssetSize) -> Text:
    if asset.is_new:
        return Text(NEW_FILE_LABEL, style="cyan")

    difference = asset.difference
    if difference >= FIFTY_KILOBYTES:
        return Text(f"({format_size_delta(difference)})", style="red")
    if difference > 0:
        return Text(f"({format_size_delta(difference)})", style="yellow")
    if difference < 0:
        return Text(f"({format_size_delta(difference)})", style="green")
    return Text("")


def render_asset_sizes(assets: List[AssetSize], build_dir: Path) -> List[Text]:
    """Lines of ``<size> <delta>  <build>/<dir>/<file>`` padded into columns"""
    labels = []
    for asset in assets:
        label = Text(format_size(asset.size))
        delta = difference_label(asset)
        if delta.plain:
            label.append(" ")
            label.append_text(delta)
        labels.append(label)

    width = max((len(label.plain) for label in labels), default=0)
    folder = Path(build_dir).name

    lines = []
    for asset, label in zip(assets, labels):
        directory, _, base = f"{folder}/{asset.name}".rpartition("/")
        line = Text("  ")
        line.append_text(label)
        line.append(" " * (width - len(label.plain) + 2))
        line.append(f"{directory}/", style="dim")
        line.append(base, style="cyan")
        lines.append(line)

    return lines


async def print_file_sizes_after_build(stats: BuildStats,
                                       previous: FileSizeSnapshot,
                                       build_dir: Path,
                                       console: Console) -> List[AssetSize]:
    """Print gzip sizes and deltas of the emitted assets"""
    assets = await collect_asset_sizes(stats, previous, build_dir)
    for line in render_asset_sizes(assets, build_dir):
        console.print(line, no_wrap=True, crop=False)
    return assets
