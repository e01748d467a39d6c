"""Base reviewer implementing the Template Method pattern.

All providers share the same review algorithm:
    review() → _build_prompt() → _call_api()   ← only this differs per provider

Subclasses implement two things only:
  - __init__: validate and store the SDK client
  - _call_api: make one raw API call and return the text response

There is deliberately no retry loop: a failed call surfaces once as a
ReviewError and the session shows it. The timeout is enforced by the SDK
client each provider builds.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from revyu_core.errors import ReviewError

logger = logging.getLogger(__name__)

_MAX_TOKENS = 4096
_TIMEOUT_SECONDS = 60.0


class BaseReviewer(ABC):
    MAX_TOKENS: int = _MAX_TOKENS
    TIMEOUT: float = _TIMEOUT_SECONDS

    # ------------------------------------------------------------------ #
    # Public interface                                                     #
    # ------------------------------------------------------------------ #

    def review(self, diff: str) -> str:
        """Ask the model to review ``diff`` and return its free-form answer.

        Raises ReviewError when the call fails or the model returns nothing.
        """
        prompt = self._build_prompt(diff)
        logger.debug("%s: requesting review for %d chars of diff", self.__class__.__name__, len(diff))
        try:
            text = self._call_api(prompt)
        except ReviewError:
            raise
        except Exception as e:
            raise ReviewError(f"{self.__class__.__name__} API call failed: {e}") from e

        if not text or not text.strip():
            raise ReviewError(f"No response from {self.__class__.__name__}")
        return text

    # ------------------------------------------------------------------ #
    # Abstract: implement in each provider                                #
    # ------------------------------------------------------------------ #

    @abstractmethod
    def _call_api(self, prompt: str) -> str:
        """Make a single API call and return the raw text response.

        This is the only method subclasses must implement. It should raise
        on failure; review() wraps the error for the caller.
        """

    # ------------------------------------------------------------------ #
    # Shared implementations                                               #
    # ------------------------------------------------------------------ #

    def _build_prompt(self, diff: str) -> str:
        """Build the single user prompt.

        The section names, the 📄 file reference format and the Severity line
        asked for here are what the checklist parser looks for.
        """
        return f"""You are an expert code reviewer. Please review the following git diff and provide a detailed analysis.

For each point you make, please:
- Reference the specific file and approximate line numbers (e.g., "main.go:45-50")
- Include relevant code snippets using markdown code blocks with language syntax
- Be specific about what should be changed and why

Please structure your review with these sections:

1. **Summary**: Brief overview of what changed

2. **Quality Assessment**:
   - Code quality observations
   - Best practices compliance
   - Performance considerations
   Reference specific files and line numbers.

3. **Issues Found**:
   For each issue, provide:
   - File reference (e.g., "📄 main.go:42")
   - Description of the problem
   - Code snippet showing the issue
   - Severity (Critical/High/Medium/Low)

4. **Suggestions**:
   For each suggestion, provide:
   - File reference (e.g., "📄 utils.go:78")
   - What to change
   - Code snippet showing the recommended change
   - Explanation of why this is better

Use markdown code blocks with proper language syntax highlighting.
Use file references in the format: 📄 filename.ext:lineNumber

Here's the git diff:

{diff}

Please provide a comprehensive review with specific file references and code examples."""
