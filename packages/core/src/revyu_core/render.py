"""Fallback rendering of a review as styled terminal text.

Used when no checklist items could be extracted. This is a separate pass over
the raw lines with its own, more forgiving rules: every non-empty line ends up
somewhere in the output, so the user always sees the review even when its
structure is unrecognisable.
"""

from __future__ import annotations

from rich.text import Text
from rich.theme import Theme

from revyu_core.parser import FENCE, FILE_REF_MARKER
from revyu_core.theme import DEFAULT_THEME, style_for
from revyu_core.utils.text import clean_inline_markdown, wrap_text

SEPARATOR_CHAR = "─"


def _is_numbered_heading(trimmed: str) -> bool:
    # "1. Summary" .. "9. Suggestions"
    return len(trimmed) > 3 and trimmed[0] in "123456789" and trimmed[1] == "." and trimmed[2] == " "


def _heading_text(text: str) -> str:
    return clean_inline_markdown(text).strip().removesuffix(":").strip()


class _MarkdownWriter:
    def __init__(self, max_width: int, theme: Theme):
        self.max_width = max_width
        self.theme = theme
        self.out = Text()

    def line(self, text: str = "", tag: str | None = None) -> None:
        if text:
            self.out.append(text, style=style_for(tag, self.theme) if tag else None)
        self.out.append("\n")

    def section(self, text: str) -> None:
        self.line()
        self.line("▸ " + text, "section")
        self.line()

    def code_block(self, code_lines: list[str]) -> None:
        for code_line in code_lines:
            self.out.append("  ")
            self.out.append(f" {code_line} ", style=style_for("code", self.theme))
            self.out.append("\n")
        self.line()

    def wrapped(self, text: str, width: int, first_prefix: str, rest_prefix: str, tag: str) -> None:
        for i, wrapped_line in enumerate(wrap_text(text, width).split("\n")):
            prefix = first_prefix if i == 0 else rest_prefix
            self.line(prefix + wrapped_line.strip(), tag)


def format_markdown(markdown: str, max_width: int, theme: Theme = DEFAULT_THEME) -> Text:
    """Convert loosely structured markdown into styled terminal text."""
    writer = _MarkdownWriter(max_width, theme)
    in_code_block = False
    code_lines: list[str] = []

    for line in markdown.split("\n"):
        trimmed = line.strip()

        if trimmed.startswith(FENCE):
            if in_code_block:
                writer.code_block(code_lines)
                code_lines = []
            in_code_block = not in_code_block
            continue

        if in_code_block:
            code_lines.append(line)
            continue

        if trimmed.startswith("---") or trimmed.startswith("==="):
            writer.line(SEPARATOR_CHAR * max(max_width, 1), "separator")
            continue

        if not trimmed:
            writer.line()
            continue

        if _is_numbered_heading(trimmed):
            writer.section(_heading_text(trimmed[3:]))
            continue

        if trimmed.startswith("**") and trimmed.endswith("**"):
            writer.line("  • " + _heading_text(trimmed), "heading")
            continue

        if trimmed.startswith("#"):
            writer.section(_heading_text(trimmed.lstrip("#")))
            continue

        if trimmed.startswith("- ") or trimmed.startswith("* "):
            text = clean_inline_markdown(trimmed[2:])
            writer.wrapped(text, max_width - 6, "    • ", "      ", "bullet")
            continue

        if FILE_REF_MARKER in trimmed:
            writer.line("  " + trimmed, "file_ref")
            continue

        writer.wrapped(clean_inline_markdown(trimmed), max_width - 4, "  ", "  ", "prose")

    # An unterminated fence still shows what was inside it.
    if in_code_block:
        writer.code_block(code_lines)

    return writer.out
