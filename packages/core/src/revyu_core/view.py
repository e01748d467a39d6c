"""Project a SessionState onto one full terminal frame."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

from revyu_core.models import ReviewItem, Severity
from revyu_core.render import SEPARATOR_CHAR, format_markdown
from revyu_core.session import Phase, SessionState, checked_count
from revyu_core.theme import DEFAULT_THEME, style_for
from revyu_core.utils.text import wrap_text

TITLE = "🔍 Revyu - AI-Powered Code Review"
KEY_HINTS = "↑/↓: Navigate  •  Space/X: Toggle  •  A: Check all  •  N: Uncheck all  •  Enter/Q: Quit"
SPINNER_FRAMES = ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")
MAX_CONTENT_WIDTH = 110

_SEVERITY_BADGES = {
    Severity.HIGH: (" ⚠ HIGH ", "severity.high"),
    Severity.MEDIUM: (" ● MED ", "severity.medium"),
    Severity.LOW: (" ○ LOW ", "severity.low"),
}


def content_width(state: SessionState) -> int:
    return min(state.width - 10, MAX_CONTENT_WIDTH)


def target_label(target: str) -> str:
    return "all changed files" if target == "." else target


class _Frame:
    def __init__(self, theme: Theme):
        self.theme = theme
        self.text = Text()

    def write(self, text: str, tag: str | None = None) -> None:
        self.text.append(text, style=style_for(tag, self.theme) if tag else None)

    def writeln(self, text: str = "", tag: str | None = None) -> None:
        if text:
            self.write(text, tag)
        self.text.append("\n")


def _render_item(frame: _Frame, item: ReviewItem, selected: bool, width: int) -> None:
    cursor = "▶ " if selected else "  "
    checkbox = "[✓]" if item.checked else "[ ]"
    frame.write(f"{cursor}{checkbox} #{item.number} ", "cursor" if selected else "item.header")
    badge, tag = _SEVERITY_BADGES[item.severity]
    frame.writeln(badge, tag)

    frame.writeln("    " + item.title, "item.title")

    if item.content:
        for line in wrap_text(item.content, width - 6).split("\n"):
            frame.writeln("    " + line, "content")

    if item.code_blocks:
        frame.writeln()
        for block in item.code_blocks:
            for code_line in block.split("\n"):
                frame.write("    ")
                frame.writeln(f" {code_line} ", "code")
    frame.writeln()


def render_checklist(
    review: str,
    items: Sequence[ReviewItem],
    width: int,
    cursor: int | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Text:
    """Render the items as a checklist, or the raw review when there are none."""
    if not items:
        text = format_markdown(review, width, theme)
        text.append("\n")
        return text

    frame = _Frame(theme)
    for i, item in enumerate(items):
        _render_item(frame, item, i == cursor, width)
    return frame.text


def render_body(state: SessionState, theme: Theme = DEFAULT_THEME) -> Text:
    """Render the frame contents (without the surrounding border)."""
    frame = _Frame(theme)
    width = content_width(state)

    frame.writeln(TITLE, "title")
    frame.writeln()
    frame.writeln(f"Reviewing: {target_label(state.target)}", "subtitle")
    frame.writeln()

    phase = state.phase

    if phase is Phase.LOADING:
        frame.write(SPINNER_FRAMES[state.frame % len(SPINNER_FRAMES)], "spinner")
        frame.writeln(" Analyzing git diff with AI...")
        frame.write("  This may take a few moments", "subtitle")
        return frame.text

    if phase is Phase.FAILED:
        frame.writeln("❌ Error", "error")
        frame.writeln()
        frame.writeln("  " + (state.error or ""), "content")
        frame.writeln()
        frame.write("Press 'q' to quit", "subtitle")
        return frame.text

    frame.writeln("✅ Review Complete", "success")
    frame.writeln(SEPARATOR_CHAR * max(width, 1), "separator")
    frame.writeln(
        f"Found {len(state.items)} issues/suggestions  •  {checked_count(state)} completed",
        "subtitle",
    )
    frame.writeln()

    frame.text.append_text(render_checklist(state.review, state.items, width, state.cursor, theme))

    frame.writeln(SEPARATOR_CHAR * max(width, 1), "separator")
    frame.write(KEY_HINTS, "hint")
    return frame.text


def render_session(state: SessionState, theme: Theme = DEFAULT_THEME) -> RenderableType:
    """Render the whole frame; nothing at all once the session is quitting."""
    if state.quitting:
        return Text()
    return Panel(
        render_body(state, theme),
        box=box.ROUNDED,
        border_style=style_for("border", theme),
        padding=(1, 2),
        expand=False,
    )
