"""Tests for deployment instructions."""

import json

import pytest

from bundle_tool.models.config import HostingTarget
from bundle_tool.services.deployment_advisor import advise, print_advice

from conftest import output_of


def set_manifest(project, **fields):
    data = {"name": "app", "scripts": {"build": "bundle-tool build"}}
    data.update(fields)
    (project / "package.json").write_text(json.dumps(data))


def advice_text(config, console):
    advice = advise(config)
    print_advice(advice, console)
    return advice, output_of(console)


class TestHostingTarget:

    @pytest.mark.parametrize("public_url, public_path, expected", [
        ("http://user.github.io/project", "/project/", HostingTarget.GITHUB_PAGES),
        ("http://mywebsite.com/project", "/project/", HostingTarget.CUSTOM_SUBPATH),
        ("http://mywebsite.com", "/", HostingTarget.EXPLICIT_ROOT),
        (None, "/", HostingTarget.IMPLICIT_ROOT),
    ])
    def test_classify(self, public_url, public_path, expected):
        assert HostingTarget.classify(public_url, public_path) is expected


class TestGithubPages:

    def test_suggests_gh_pages_without_deploy_script(self, project, make_config, console):
        set_manifest(project, homepage="http://user.github.io/project")

        advice, output = advice_text(make_config(), console)

        assert advice.target is HostingTarget.GITHUB_PAGES
        assert "hosted at /project/." in output
        assert "To publish it at http://user.github.io/project, run:" in output
        assert "npm install --save-dev gh-pages" in output
        assert '"deploy": "gh-pages -d build"' in output
        assert "npm run deploy" in output

    def test_uses_yarn_when_lockfile_exists(self, project, make_config, console):
        set_manifest(project, homepage="http://user.github.io/project")
        (project / "yarn.lock").write_text("")

        _, output = advice_text(make_config(), console)

        assert "yarn add --dev gh-pages" in output
        assert '"predeploy": "yarn run build",' in output
        assert "yarn run deploy" in output

    def test_omits_install_when_deploy_script_exists(self, project, make_config, console):
        set_manifest(project, homepage="http://user.github.io/project",
                     scripts={"deploy": "gh-pages -d build"})

        _, output = advice_text(make_config(), console)

        assert "install --save-dev gh-pages" not in output
        assert "Add the following script" not in output
        assert "npm run deploy" in output


class TestOtherTargets:

    def test_custom_subpath(self, project, make_config, console):
        set_manifest(project, homepage="http://mywebsite.com/project")

        advice, output = advice_text(make_config(), console)

        assert advice.target is HostingTarget.CUSTOM_SUBPATH
        assert "hosted at /project/." in output
        assert "The build folder is ready to be deployed." in output
        assert "serve" not in output

    def test_public_url_environment_overrides_homepage(self, project, make_config):
        set_manifest(project, homepage="http://user.github.io/project")

        config = make_config(PUBLIC_URL="https://cdn.example.com/app")

        assert config.public_path == "https://cdn.example.com/app/"
        assert config.hosting_target is HostingTarget.CUSTOM_SUBPATH

    def test_explicit_root(self, project, make_config, console):
        set_manifest(project, homepage="http://mywebsite.com")

        advice, output = advice_text(make_config(), console)

        assert advice.target is HostingTarget.EXPLICIT_ROOT
        assert "hosted at http://mywebsite.com." in output
        assert "npm install -g serve" in output
        assert "serve -s build" in output

    def test_implicit_root(self, project, make_config, console):
        advice, output = advice_text(make_config(), console)

        assert advice.target is HostingTarget.IMPLICIT_ROOT
        assert "hosted at the server root." in output
        assert '"homepage": "http://myname.github.io/myapp",' in output
        assert "You may serve it with a static server:" in output

    def test_build_folder_relative_to_working_dir(self, project, console):
        from bundle_tool.core.config_loader import load_build_config

        config = load_build_config(project, environ={}, working_dir=project.parent)
        _, output = advice_text(config, console)

        assert "The app/build folder is ready to be deployed." in output

    @pytest.mark.parametrize("working_dir", ["src", ".."])
    def test_deploy_script_uses_project_relative_folder(self, project, console, working_dir):
        from bundle_tool.core.config_loader import load_build_config

        set_manifest(project, homepage="http://user.github.io/project")
        config = load_build_config(project, environ={}, working_dir=project / working_dir)
        _, output = advice_text(config, console)

        assert '"deploy": "gh-pages -d build"' in output
