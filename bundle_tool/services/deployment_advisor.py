# bundle_tool/services/deployment_advisor.py
"""Post-build deployment instructions"""

from dataclasses import dataclass, field
from typing import List
from urllib.parse import urlparse

from rich.console import Console
from rich.markup import escape

from ..constants import GH_PAGES_PACKAGE, PACKAGE_JSON_FILE, STATIC_SERVER_PACKAGE
from ..core.path_resolver import PathResolver
from ..models.config import BuildConfig, HostingTarget, PackageManager


@dataclass
class DeploymentAdvice:
    """Instructions selected for one hosting target, as rich markup lines"""

    target: HostingTarget
    lines: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def _homepage_hint() -> str:
    return (f"You can control this with the [green]homepage[/green] field in your "
            f"[cyan]{PACKAGE_JSON_FILE}[/cyan].")


def _build_folder(config: BuildConfig) -> str:
    resolver = PathResolver(config.paths.project_root)
    relative = resolver.make_relative(config.paths.app_build, config.working_dir)
    return relative.as_posix()


def _script_build_folder(config: BuildConfig) -> str:
    """Build folder as seen by package.json scripts, which run from the project root"""
    resolver = PathResolver(config.paths.project_root)
    return resolver.make_relative(config.paths.app_build).as_posix()


def github_pages_advice(config: BuildConfig, build_folder: str) -> List[str]:
    pm = config.package_manager.value
    pathname = urlparse(config.public_path).path or "/"

    lines = [
        f"The project was built assuming it is hosted at [green]{escape(pathname)}[/green].",
        _homepage_hint(),
        "",
        f"The [cyan]{escape(build_folder)}[/cyan] folder is ready to be deployed.",
        f"To publish it at [green]{escape(config.public_url)}[/green], run:",
    ]

    if not config.manifest.has_deploy_script:
        lines += [
            "",
            f"  [cyan]{pm}[/cyan] {config.package_manager.install_dev(GH_PAGES_PACKAGE)}",
            "",
            f"Add the following script in your [cyan]{PACKAGE_JSON_FILE}[/cyan].",
            "",
            "    [dim]// ...[/dim]",
            '    [yellow]"scripts"[/yellow]: {',
            "      [dim]// ...[/dim]",
            f'      [yellow]"predeploy"[/yellow]: [yellow]"{pm} run build",[/yellow]',
            f'      [yellow]"deploy"[/yellow]: [yellow]"{GH_PAGES_PACKAGE} -d {escape(_script_build_folder(config))}"[/yellow]',
            "    }",
            "",
            "Then run:",
        ]

    lines += [
        "",
        f"  [cyan]{pm}[/cyan] run deploy",
        "",
    ]
    return lines


def custom_subpath_advice(config: BuildConfig, build_folder: str) -> List[str]:
    return [
        f"The project was built assuming it is hosted at [green]{escape(config.public_path)}[/green].",
        _homepage_hint(),
        "",
        f"The [cyan]{escape(build_folder)}[/cyan] folder is ready to be deployed.",
        "",
    ]


def static_server_advice(package_manager: PackageManager, build_folder: str) -> List[str]:
    pm = package_manager.value
    return [
        f"The [cyan]{escape(build_folder)}[/cyan] folder is ready to be deployed.",
        "You may serve it with a static server:",
        "",
        f"  [cyan]{pm}[/cyan] {package_manager.install_global(STATIC_SERVER_PACKAGE)}",
        f"  [cyan]{STATIC_SERVER_PACKAGE}[/cyan] -s {escape(build_folder)}",
        "",
    ]


def explicit_root_advice(config: BuildConfig, build_folder: str) -> List[str]:
    return [
        f"The project was built assuming it is hosted at [green]{escape(config.public_url)}[/green].",
        _homepage_hint(),
        "",
    ] + static_server_advice(config.package_manager, build_folder)


def implicit_root_advice(config: BuildConfig, build_folder: str) -> List[str]:
    return [
        "The project was built assuming it is hosted at the server root.",
        f"To override this, specify the [green]homepage[/green] in your [cyan]{PACKAGE_JSON_FILE}[/cyan].",
        "For example, add this to build it for GitHub Pages:",
        "",
        '  [green]"homepage"[/green][cyan]: [/cyan][green]"http://myname.github.io/myapp"[/green][cyan],[/cyan]',
        "",
    ] + static_server_advice(config.package_manager, build_folder)


TEMPLATES = {
    HostingTarget.GITHUB_PAGES: github_pages_advice,
    HostingTarget.CUSTOM_SUBPATH: custom_subpath_advice,
    HostingTarget.EXPLICIT_ROOT: explicit_root_advice,
    HostingTarget.IMPLICIT_ROOT: implicit_root_advice,
}


def advise(config: BuildConfig) -> DeploymentAdvice:
    """Select the instructions matching the configured hosting target"""
    target = config.hosting_target
    lines = TEMPLATES[target](config, _build_folder(config))
    return DeploymentAdvice(target=target, lines=lines)


def print_advice(advice: DeploymentAdvice, console: Console) -> None:
    for line in advice.lines:
        console.print(line, highlight=False)
