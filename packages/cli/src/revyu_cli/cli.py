"""CLI entry point for revyu.

Commands:
  review   review the current git diff with AI and walk through the findings
  show     display a saved review as a checklist
"""

from __future__ import annotations

import importlib.metadata
import logging

import click

from revyu_cli.commands.review import review_cmd
from revyu_cli.commands.show import show_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("revyu"),
    prog_name="revyu",
)
@click.option(
    "--config",
    "config_path",
    default=".revyu.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="REVYU_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """AI-powered code review for your uncommitted changes."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(review_cmd)
main.add_command(show_cmd)
