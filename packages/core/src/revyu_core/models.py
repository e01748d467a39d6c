"""Review checklist data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def from_text(cls, line: str) -> Severity:
        """Classify a free-form "Severity: ..." line.

        Critical findings are folded into HIGH; anything unrecognised is LOW.
        """
        lower = line.lower()
        if "critical" in lower or "high" in lower:
            return cls.HIGH
        if "medium" in lower:
            return cls.MEDIUM
        return cls.LOW


@dataclass
class ReviewItem:
    """One issue or suggestion extracted from the review text."""

    number: int
    title: str  # the raw file-reference line, e.g. "📄 main.go:42"
    content: str = ""
    code_blocks: list[str] = field(default_factory=list)
    severity: Severity = Severity.LOW
    checked: bool = False

    def append_content(self, text: str) -> None:
        text = text.strip()
        if not text:
            return
        self.content = f"{self.content} {text}" if self.content else text
