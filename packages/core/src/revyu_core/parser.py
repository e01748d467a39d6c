"""Extract checklist items from a free-form AI review.

The review is expected to contain "Issues Found" and "Suggestions" sections
whose entries start with a file reference such as ``📄 main.go:42``. Nothing
about that structure is enforced: the scan is a single top-to-bottom pass over
the lines driven by an ordered table of rules, and anything a rule does not
recognise is ignored. When the text does not match closely enough, the result
is simply empty and the caller falls back to plain rendering.

Each rule is a ``(predicate, transition)`` pair. For every line the first rule
whose predicate matches is applied and the remaining rules are skipped, so the
order of RULES is the priority of the state machine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from revyu_core.models import ReviewItem, Severity

logger = logging.getLogger(__name__)

FILE_REF_MARKER = "📄"
FENCE = "```"
FILE_EXTENSIONS = (".go", ".js", ".ts", ".py", ".java", ".vue", ".jsx", ".tsx")

_ISSUES_MARKERS = ("**Issues Found**", "3. Issues")
_SUGGESTIONS_MARKERS = ("**Suggestions**", "4. Suggestions")


class Section(Enum):
    NONE = "none"
    ISSUES = "issues"
    SUGGESTIONS = "suggestions"


@dataclass
class ScanState:
    """Transient state of one extraction pass."""

    section: Section = Section.NONE
    in_fence: bool = False
    code_lines: list[str] = field(default_factory=list)
    current: Optional[ReviewItem] = None
    next_number: int = 1
    items: list[ReviewItem] = field(default_factory=list)

    def start_item(self, title: str) -> None:
        self.finish_item()
        self.current = ReviewItem(number=self.next_number, title=title)
        self.next_number += 1

    def finish_item(self) -> None:
        """Publish the item under construction, if any."""
        if self.current is not None:
            self.items.append(self.current)
            self.current = None


@dataclass(frozen=True)
class Rule:
    name: str
    matches: Callable[[ScanState, str, str], bool]
    apply: Callable[[ScanState, str, str], None]


# ---------------------------------------------------------------------- #
# Predicates: (state, raw line, trimmed line) -> bool                     #
# ---------------------------------------------------------------------- #


def is_issues_header(state: ScanState, line: str, trimmed: str) -> bool:
    return any(marker in trimmed for marker in _ISSUES_MARKERS)


def is_suggestions_header(state: ScanState, line: str, trimmed: str) -> bool:
    return any(marker in trimmed for marker in _SUGGESTIONS_MARKERS)


def is_bold_header(state: ScanState, line: str, trimmed: str) -> bool:
    return trimmed.startswith("**") and trimmed.endswith("**")


def is_outside_section(state: ScanState, line: str, trimmed: str) -> bool:
    return state.section is Section.NONE


def is_file_reference(state: ScanState, line: str, trimmed: str) -> bool:
    if FILE_REF_MARKER not in trimmed and ":" not in trimmed:
        return False
    return any(ext in trimmed for ext in FILE_EXTENSIONS)


def is_fence(state: ScanState, line: str, trimmed: str) -> bool:
    return trimmed.startswith(FENCE)


def is_in_fence(state: ScanState, line: str, trimmed: str) -> bool:
    return state.in_fence


def is_severity(state: ScanState, line: str, trimmed: str) -> bool:
    return state.current is not None and "severity:" in trimmed.lower()


def is_content(state: ScanState, line: str, trimmed: str) -> bool:
    return state.current is not None and trimmed != ""


# ---------------------------------------------------------------------- #
# Transitions                                                             #
# ---------------------------------------------------------------------- #


def enter_issues(state: ScanState, line: str, trimmed: str) -> None:
    state.section = Section.ISSUES


def enter_suggestions(state: ScanState, line: str, trimmed: str) -> None:
    state.section = Section.SUGGESTIONS


def leave_section(state: ScanState, line: str, trimmed: str) -> None:
    # Any other bold line is an unrelated section header. Items that follow it
    # are dropped until an Issues/Suggestions header is seen again.
    state.section = Section.NONE


def skip(state: ScanState, line: str, trimmed: str) -> None:
    pass


def begin_item(state: ScanState, line: str, trimmed: str) -> None:
    state.start_item(trimmed)


def toggle_fence(state: ScanState, line: str, trimmed: str) -> None:
    if not state.in_fence:
        state.in_fence = True
        state.code_lines = []
        return
    state.in_fence = False
    if state.current is not None and state.code_lines:
        state.current.code_blocks.append("\n".join(state.code_lines))
        state.code_lines = []


def collect_code(state: ScanState, line: str, trimmed: str) -> None:
    state.code_lines.append(line)


def set_severity(state: ScanState, line: str, trimmed: str) -> None:
    state.current.severity = Severity.from_text(trimmed)


def add_content(state: ScanState, line: str, trimmed: str) -> None:
    state.current.append_content(trimmed)


RULES: tuple[Rule, ...] = (
    Rule("issues-header", is_issues_header, enter_issues),
    Rule("suggestions-header", is_suggestions_header, enter_suggestions),
    Rule("bold-header", is_bold_header, leave_section),
    Rule("outside-section", is_outside_section, skip),
    Rule("file-reference", is_file_reference, begin_item),
    Rule("fence", is_fence, toggle_fence),
    Rule("code", is_in_fence, collect_code),
    Rule("severity", is_severity, set_severity),
    Rule("content", is_content, add_content),
)


def scan_line(state: ScanState, line: str, rules: tuple[Rule, ...] = RULES) -> Optional[Rule]:
    """Apply the first matching rule to ``line`` and return it (None if no rule matched)."""
    trimmed = line.strip()
    for rule in rules:
        if rule.matches(state, line, trimmed):
            rule.apply(state, line, trimmed)
            return rule
    return None


def parse_review_items(review: str) -> list[ReviewItem]:
    """Return the issues and suggestions found in ``review``, in discovery order."""
    state = ScanState()
    for line in review.split("\n"):
        scan_line(state, line)
    state.finish_item()

    logger.debug("Extracted %d review item(s)", len(state.items))
    return state.items
