"""review command: review the working tree diff with AI."""

from __future__ import annotations

import click
from rich.console import Console

from revyu_core.errors import GitDiffError, ReviewError
from revyu_core.parser import parse_review_items
from revyu_core.providers import PROVIDERS, get_reviewer
from revyu_core.session import Phase
from revyu_core.vcs.diff import get_git_diff
from revyu_cli.output import print_review, print_session_summary

console = Console()


@click.command("review")
@click.argument("path", default=".", required=False)
@click.option(
    "--model",
    type=click.Choice(PROVIDERS),
    default=None,
    help="AI model provider. Overrides config file.",
)
@click.option(
    "--plain",
    is_flag=True,
    help="Print the review instead of opening the interactive checklist.",
)
@click.pass_context
def review_cmd(ctx, path: str, model: str | None, plain: bool):
    """Review the git diff of PATH (default: all changed files).

    \b
    Required environment variables (or entries in ./.env):
      OPENAI_API_KEY       Required when using --model openai (default)
      ANTHROPIC_API_KEY    Required when using --model anthropic
    """
    from revyu_core.config import PROVIDER_KEY_ENV, load_config
    from revyu_cli.auth import resolve_api_key

    config_path = ctx.obj.get("config_path", ".revyu.yml") if ctx.obj else ".revyu.yml"
    config = load_config(config_path, cli_overrides={"model": model})

    provider = config["model"]
    if provider not in PROVIDERS:
        raise click.UsageError(f"Unknown model provider: {provider!r}. Choose 'openai' or 'anthropic'.")

    api_key = resolve_api_key(provider)
    if not api_key:
        var = PROVIDER_KEY_ENV[provider]
        raise click.UsageError(f"{var} not found. Set the {var} environment variable or add it to a .env file.")

    try:
        diff = get_git_diff(path)
    except GitDiffError as e:
        raise click.ClickException(str(e))

    if not diff.strip():
        console.print("[dim]No changes detected in git diff[/dim]")
        return

    reviewer = get_reviewer(config, api_key)

    if plain:
        with console.status("Analyzing git diff with AI..."):
            try:
                review = reviewer.review(diff)
            except ReviewError as e:
                raise click.ClickException(str(e))
        print_review(console, review, parse_review_items(review))
        return

    from revyu_cli.tui.app import ReviewApp

    app = ReviewApp(
        fetch=lambda: reviewer.review(diff),
        target=path,
        width=config.get("width", 120),
        height=config.get("height", 40),
    )
    final = app.run()
    if final is not None and final.phase is Phase.READY:
        print_session_summary(console, final.items)
