"""Semantic styles for terminal output.

Renderers ask for a style by what the text *is* (a heading, a code line, a
high-severity badge) and never hold style objects of their own. The theme is
an ordinary value, so callers can pass a different one without touching any
module state.
"""

from __future__ import annotations

from rich.style import Style
from rich.theme import Theme

DEFAULT_THEME = Theme(
    {
        "title": "bold #7D56F4",
        "subtitle": "#6272A4",
        "separator": "#44475A",
        "error": "bold #FF0000",
        "success": "bold #04B575",
        "content": "#F8F8F2",
        "section": "bold #BD93F9",
        "heading": "bold #50FA7B",
        "code": "#50FA7B on #282A36",
        "prose": "#F8F8F2",
        "bullet": "#F8F8F2",
        "file_ref": "bold #8BE9FD",
        "item.title": "#8BE9FD",
        "item.header": "bold #F8F8F2",
        "cursor": "bold #F8F8F2 on #44475A",
        "severity.high": "bold #FF0000 on #4a0000",
        "severity.medium": "bold #FFA500 on #4a3000",
        "severity.low": "bold #FFD700 on #3a3000",
        "spinner": "#7D56F4",
        "hint": "italic #6272A4",
        "border": "#7D56F4",
    },
    inherit=False,
)


def style_for(tag: str, theme: Theme = DEFAULT_THEME) -> Style:
    """Return the concrete style for ``tag``, or a null style if it is unknown."""
    return theme.styles.get(tag, Style.null())
