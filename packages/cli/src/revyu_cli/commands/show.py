"""show command: display a saved review without calling any API."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from revyu_core.parser import parse_review_items
from revyu_core.session import Phase
from revyu_cli.output import print_review, print_session_summary

console = Console()


@click.command("show")
@click.argument("review_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--interactive", "-i", is_flag=True, help="Open the saved review as an interactive checklist.")
def show_cmd(review_file: Path, interactive: bool):
    """Show a saved AI review (markdown) as a checklist."""
    review = review_file.read_text(encoding="utf-8")

    if not interactive:
        print_review(console, review, parse_review_items(review))
        return

    from revyu_cli.tui.app import ReviewApp

    final = ReviewApp(fetch=lambda: review, target=str(review_file)).run()
    if final is not None and final.phase is Phase.READY:
        print_session_summary(console, final.items)
