"""Plain-text helpers shared by the item view and the fallback renderer."""

from __future__ import annotations

DEFAULT_WIDTH = 80
CONTINUATION_INDENT = "  "

# Inline emphasis markers, longest first so "**" is removed before "*".
_INLINE_MARKERS = ("**", "__", "*", "_", "`")


def wrap_text(text: str, width: int) -> str:
    """Greedily reflow ``text`` into lines no longer than ``width``.

    Continuation lines start with a two-space indent. Words are never split,
    so a single word longer than ``width`` is emitted on its own line as-is.
    A non-positive width falls back to DEFAULT_WIDTH.
    """
    if width <= 0:
        width = DEFAULT_WIDTH

    parts: list[str] = []
    line_len = 0

    for i, word in enumerate(text.split()):
        if line_len + len(word) + 1 > width and line_len > 0:
            parts.append("\n" + CONTINUATION_INDENT)
            line_len = len(CONTINUATION_INDENT)
        elif i > 0:
            parts.append(" ")
            line_len += 1
        parts.append(word)
        line_len += len(word)

    return "".join(parts)


def clean_inline_markdown(text: str) -> str:
    """Remove bold, italic and inline-code markers but keep the text."""
    for marker in _INLINE_MARKERS:
        text = text.replace(marker, "")
    return text
