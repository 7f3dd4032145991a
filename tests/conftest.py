import io
import json
from pathlib import Path
from typing import Dict, Optional

import pytest
from rich.console import Console

from bundle_tool.core.bundler import Bundler
from bundle_tool.core.config_loader import load_build_config
from bundle_tool.models.build import CompileResult


class FakeBundler(Bundler):
    """Writes canned files into the build directory and returns a canned result"""

    def __init__(self, result: Optional[CompileResult] = None, files: Optional[Dict[str, str]] = None):
        self.files = files if files is not None else {
            "index.html": "<html>bundled</html>",
            "static/js/main.1a2b3c4d.js": "console.log('app');\n" * 50,
            "static/css/main.5e6f7a8b.css": "body { margin: 0; }\n" * 20,
        }
        self.result = result or CompileResult.from_stats(stats_for(self.files))
        self.calls = 0

    async def compile(self, config):
        self.calls += 1
        if self.result.stats is not None:
            for name, content in self.files.items():
                target = config.paths.app_build / name
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(content)
        return self.result


def stats_for(files, errors=(), warnings=()):
    return {
        "hash": "abc123",
        "assets": [{"name": name, "size": len(content)} for name, content in files.items()],
        "errors": list(errors),
        "warnings": list(warnings),
    }


def snapshot_tree(directory: Path) -> Dict[str, bytes]:
    return {
        path.relative_to(directory).as_posix(): path.read_bytes()
        for path in sorted(directory.rglob("*")) if path.is_file()
    }


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "app"
    (root / "public" / "images").mkdir(parents=True)
    (root / "src").mkdir()
    (root / "config").mkdir()

    (root / "package.json").write_text(json.dumps({"name": "app", "scripts": {"build": "bundle-tool build"}}))
    (root / "public" / "index.html").write_text("<html>template</html>")
    (root / "public" / "favicon.ico").write_bytes(b"\x00\x01icon")
    (root / "public" / "images" / "logo.svg").write_text("<svg/>")
    (root / "src" / "index.tsx").write_text("export const app = 1;\n")
    (root / "config" / "webpack.config.prod.js").write_text("module.exports = {};\n")
    return root


@pytest.fixture
def make_config(project: Path):
    def factory(**environ):
        return load_build_config(project, environ=environ, working_dir=project)
    return factory


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


def output_of(console: Console) -> str:
    return console.file.getvalue()
