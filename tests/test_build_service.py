"""Tests for the production build workflow."""

import pytest

from bundle_tool.api.exceptions import (
    BundlerError,
    CompileError,
    MissingRequiredFileError,
    WarningsAsErrorsError,
)
from bundle_tool.models.build import CompileKind, CompileResult
from bundle_tool.services.build_service import BuildService

from conftest import FakeBundler, output_of, snapshot_tree, stats_for


def make_service(config, bundler, console):
    return BuildService(config, bundler=bundler, console=console)


class TestPreflight:

    @pytest.mark.asyncio
    async def test_missing_entry_stops_before_touching_build(self, project, make_config, console):
        (project / "src" / "index.tsx").unlink()
        (project / "build").mkdir()
        (project / "build" / "stale.js").write_text("stale")
        bundler = FakeBundler()

        with pytest.raises(MissingRequiredFileError):
            await make_service(make_config(), bundler, console).run()

        assert bundler.calls == 0
        assert (project / "build" / "stale.js").read_text() == "stale"
        assert "Could not find a required file." in output_of(console)


class TestSuccessfulBuild:

    @pytest.mark.asyncio
    async def test_build_tree(self, project, make_config, console):
        (project / "build").mkdir()
        (project / "build" / "stale.js").write_text("stale")
        bundler = FakeBundler()

        report = await make_service(make_config(), bundler, console).run()

        tree = snapshot_tree(project / "build")
        assert set(tree) == {
            "index.html",
            "static/js/main.1a2b3c4d.js",
            "static/css/main.5e6f7a8b.css",
            "favicon.ico",
            "images/logo.svg",
        }
        assert tree["index.html"] == b"<html>bundled</html>"
        assert report.compile_result.kind is CompileKind.SUCCESS
        assert bundler.calls == 1

    @pytest.mark.asyncio
    async def test_output_sections(self, project, make_config, console):
        report = await make_service(make_config(), FakeBundler(), console).run()
        output = output_of(console)

        assert output.startswith("Creating an optimized production build...")
        assert "Compiled successfully." in output
        assert "File sizes after gzip:" in output
        assert "build/static/js/main.1a2b3c4d.js" in output
        assert "hosted at the server root." in output
        assert output.index("Compiled successfully.") < output.index("File sizes after gzip:")
        assert {asset.name for asset in report.assets} == {
            "static/js/main.1a2b3c4d.js",
            "static/css/main.5e6f7a8b.css",
        }

    @pytest.mark.asyncio
    async def test_repeated_builds_are_identical(self, project, make_config, console):
        service = make_service(make_config(), FakeBundler(), console)

        await service.run()
        first = snapshot_tree(project / "build")
        second_report = await service.run()

        assert snapshot_tree(project / "build") == first
        assert all(not asset.is_new for asset in second_report.assets)
        assert all(asset.difference == 0 for asset in second_report.assets)

    @pytest.mark.asyncio
    async def test_warnings_outside_ci(self, project, make_config, console):
        files = FakeBundler().files
        bundler = FakeBundler(CompileResult.from_stats(stats_for(files, warnings=["Unused variable"])))

        report = await make_service(make_config(), bundler, console).run()

        assert report.compile_result.kind is CompileKind.WARNINGS
        assert "Compiled successfully." in output_of(console)


class TestFailedBuild:

    @pytest.mark.asyncio
    async def test_warnings_fail_in_ci(self, project, make_config, console):
        files = FakeBundler().files
        bundler = FakeBundler(CompileResult.from_stats(stats_for(files, warnings=["Unused variable"])))

        with pytest.raises(WarningsAsErrorsError) as excinfo:
            await make_service(make_config(CI="true"), bundler, console).run()

        output = output_of(console)
        assert excinfo.value.count == 1
        assert "warnings are treated as failures" in output
        assert "Unused variable" in output
        assert "Compiled successfully." not in output

    @pytest.mark.asyncio
    async def test_errors_win_over_ci_warnings(self, project, make_config, console):
        files = FakeBundler().files
        stats = stats_for(files, errors=["Syntax error"], warnings=["Unused variable"])
        bundler = FakeBundler(CompileResult.from_stats(stats))

        with pytest.raises(CompileError):
            await make_service(make_config(CI="true"), bundler, console).run()

        output = output_of(console)
        assert output.count("Failed to compile.") == 1
        assert "Syntax error" in output
        assert "Unused variable" not in output

    @pytest.mark.asyncio
    async def test_hard_error_skips_public_copy(self, project, make_config, console):
        bundler = FakeBundler(CompileResult.hard_error(BundlerError("webpack: command not found")))

        with pytest.raises(BundlerError):
            await make_service(make_config(), bundler, console).run()

        output = output_of(console)
        assert "Failed to compile." in output
        assert "webpack: command not found" in output
        assert list((project / "build").iterdir()) == []
