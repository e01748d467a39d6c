"""Non-interactive output shared by the commands."""

from __future__ import annotations

from rich.console import Console

from revyu_core.models import ReviewItem
from revyu_core.view import MAX_CONTENT_WIDTH, render_checklist


def print_review(console: Console, review: str, items: list[ReviewItem]) -> None:
    """Print the checklist (or the fallback rendering when ``items`` is empty)."""
    width = min(console.width - 4, MAX_CONTENT_WIDTH)
    if items:
        console.print(f"[bold]Found {len(items)} issues/suggestions[/bold]\n")
    console.print(render_checklist(review, items, width))


def print_session_summary(console: Console, items: tuple[ReviewItem, ...] | list[ReviewItem]) -> None:
    if not items:
        return
    done = sum(1 for item in items if item.checked)
    console.print(f"[green]{done} of {len(items)} item(s) completed.[/green]")
