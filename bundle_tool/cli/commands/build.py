"""Build command implementation"""

import logging

import click

from ..utils.output import console, print_error
from ...api.builder import build as run_build
from ...api.exceptions import BundleToolError, ConfigError

logger = logging.getLogger(__name__)


@click.command()
@click.pass_context
def build(ctx):
    """Create an optimized production build

    Checks the entry files, runs the bundler once, prints gzip size
    changes and deployment instructions, then copies the public folder
    into the build folder (except index.html, which the bundler emits).

    Compile errors always fail the build. When CI is set, warnings are
    treated as failures too.

    Examples:
        bundle-tool build
        CI=true bundle-tool build
    """
    try:
        run_build(console=console)

    except ConfigError as e:
        print_error("Invalid project configuration", e)
        ctx.exit(1)

    except BundleToolError as e:
        # Diagnostics have already been printed
        logger.debug(f"Build stopped [{e.error_code}]: {e}")
        ctx.exit(1)
