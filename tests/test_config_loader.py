"""Tests for build configuration loading."""

import json

import pytest

from bundle_tool.api.exceptions import ConfigError
from bundle_tool.core.config_loader import (
    get_served_path,
    is_ci_environment,
    load_build_config,
    merge_environment,
    parse_bundler_command,
)
from bundle_tool.core.path_resolver import PathResolver
from bundle_tool.models.config import PackageManager


class TestEnvironment:

    def test_node_env_is_forced(self, make_config):
        config = make_config(NODE_ENV="development")

        assert config.environment["NODE_ENV"] == "production"

    def test_dotenv_does_not_override_process_values(self, project):
        (project / ".env").write_text("API_URL=from-file\nFEATURE=on\n")

        merged = merge_environment({"API_URL": "from-process"}, project / ".env")

        assert merged["API_URL"] == "from-process"
        assert merged["FEATURE"] == "on"

    def test_process_environment_is_not_mutated(self, project):
        (project / ".env").write_text("FEATURE=on\n")
        environ = {"PATH": "/usr/bin"}

        load_build_config(project, environ=environ)

        assert environ == {"PATH": "/usr/bin"}

    @pytest.mark.parametrize("value, expected", [
        ("true", True),
        ("1", True),
        ("false", False),
        ("FALSE", False),
        ("", False),
    ])
    def test_ci_detection(self, value, expected):
        assert is_ci_environment({"CI": value}) is expected

    def test_ci_unset(self):
        assert is_ci_environment({}) is False

    def test_ci_from_dotenv(self, project):
        (project / ".env").write_text("CI=true\n")

        assert load_build_config(project, environ={}).is_ci is True


class TestPaths:

    def test_defaults(self, project, make_config):
        paths = make_config().paths

        assert paths.project_root == project.resolve()
        assert paths.app_html == project.resolve() / "public" / "index.html"
        assert paths.app_index == project.resolve() / "src" / "index.tsx"
        assert paths.app_build == project.resolve() / "build"
        assert paths.required_files == [paths.app_html, paths.app_index]

    def test_project_file_overrides(self, project, make_config):
        (project / ".bundle-tool.yaml").write_text(
            "paths:\n"
            "  index: src/main.js\n"
            "  build: dist\n"
            "bundler:\n"
            "  command: yarn webpack\n"
        )

        config = make_config()

        assert config.paths.app_index == project.resolve() / "src" / "main.js"
        assert config.paths.app_build == project.resolve() / "dist"
        assert config.bundler_command == ["yarn", "webpack"]

    def test_unknown_path_key(self, project, make_config):
        (project / ".bundle-tool.yaml").write_text("paths:\n  entry: src/x.js\n")

        with pytest.raises(ConfigError):
            make_config()

    def test_invalid_yaml(self, project, make_config):
        (project / ".bundle-tool.yaml").write_text("paths: [unclosed\n")

        with pytest.raises(ConfigError):
            make_config()

    def test_invalid_package_json(self, project, make_config):
        (project / "package.json").write_text("{not json")

        with pytest.raises(ConfigError):
            make_config()

    def test_find_project_root_from_subdirectory(self, project):
        assert PathResolver.find_project_root(project / "src") == project.resolve()

    def test_no_project_root(self, tmp_path):
        with pytest.raises(ConfigError):
            PathResolver.find_project_root(tmp_path)


class TestManifest:

    def test_homepage_and_scripts(self, project, make_config):
        (project / "package.json").write_text(json.dumps({
            "homepage": "http://mywebsite.com/project",
            "scripts": {"deploy": "rsync -a build/ host:/srv"},
        }))

        config = make_config()

        assert config.public_url == "http://mywebsite.com/project"
        assert config.public_path == "/project/"
        assert config.manifest.has_deploy_script is True

    def test_package_manager(self, project, make_config):
        assert make_config().package_manager is PackageManager.NPM

        (project / "yarn.lock").write_text("")

        assert make_config().package_manager is PackageManager.YARN


@pytest.mark.parametrize("env_url, homepage, expected", [
    (None, None, "/"),
    (None, "http://mywebsite.com", "/"),
    (None, "http://mywebsite.com/project", "/project/"),
    (None, "http://mywebsite.com/project/", "/project/"),
    ("/static", "http://mywebsite.com/project", "/static/"),
])
def test_served_path(env_url, homepage, expected):
    assert get_served_path(env_url, homepage) == expected


def test_bundler_command_validation():
    assert parse_bundler_command(None) == ["npx", "webpack"]
    assert parse_bundler_command(["node", "scripts/webpack.js"]) == ["node", "scripts/webpack.js"]
    with pytest.raises(ConfigError):
        parse_bundler_command([])
