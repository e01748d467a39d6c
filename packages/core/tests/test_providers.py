"""Tests for AI provider implementations.

Shared behaviour (_build_prompt, error wrapping) lives in BaseReviewer and is
tested once via a lightweight stub, not duplicated per provider.
Provider-specific tests cover only what differs between implementations: the
SDK client setup and _call_api.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from revyu_core.errors import ReviewError
from revyu_core.providers import get_reviewer
from revyu_core.providers.anthropic import AnthropicReviewer
from revyu_core.providers.base import BaseReviewer
from revyu_core.providers.openai import OpenAIReviewer

REVIEW_TEXT = "**Issues Found**\n📄 main.go:1\nBad"


class _StubReviewer(BaseReviewer):
    def __init__(self, response=REVIEW_TEXT, error=None):
        self.response = response
        self.error = error
        self.prompts = []

    def _call_api(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


# ---------------------------------------------------------------------------
# Shared behaviour: tested once through the stub, not per provider
# ---------------------------------------------------------------------------


class TestBaseReviewerPrompt:
    def test_prompt_contains_diff(self):
        prompt = _StubReviewer()._build_prompt("+added line")
        assert "+added line" in prompt

    def test_prompt_asks_for_parseable_sections(self):
        prompt = _StubReviewer()._build_prompt("")
        assert "3. **Issues Found**" in prompt
        assert "4. **Suggestions**" in prompt
        assert "📄 filename.ext:lineNumber" in prompt
        assert "Severity" in prompt


class TestBaseReviewerReview:
    def test_returns_model_text(self):
        assert _StubReviewer().review("+x") == REVIEW_TEXT

    def test_calls_api_once(self):
        reviewer = _StubReviewer()
        reviewer.review("+x")
        assert len(reviewer.prompts) == 1

    def test_wraps_sdk_errors(self):
        reviewer = _StubReviewer(error=RuntimeError("network down"))
        with pytest.raises(ReviewError, match="network down"):
            reviewer.review("+x")
        # no retries
        assert len(reviewer.prompts) == 1

    def test_review_error_passes_through(self):
        with pytest.raises(ReviewError, match="already wrapped"):
            _StubReviewer(error=ReviewError("already wrapped")).review("+x")

    def test_empty_response_raises(self):
        with pytest.raises(ReviewError, match="No response"):
            _StubReviewer(response="  \n").review("+x")


# ---------------------------------------------------------------------------
# Provider-specific: only what differs between Anthropic and OpenAI
# ---------------------------------------------------------------------------


class TestOpenAIReviewer:
    def test_raises_import_error_without_sdk(self):
        """OpenAIReviewer.__init__ must raise if the openai package is absent."""
        with patch("revyu_core.providers.openai._OpenAI", None):
            with pytest.raises(ImportError):
                OpenAIReviewer(api_key="key")

    def test_client_built_with_timeout_and_no_retries(self):
        client_cls = MagicMock()
        with patch("revyu_core.providers.openai._OpenAI", client_cls):
            reviewer = OpenAIReviewer(api_key="key", timeout=12)
        client_cls.assert_called_once_with(api_key="key", timeout=12, max_retries=0)
        assert reviewer.timeout == 12

    def test_default_timeout(self):
        with patch("revyu_core.providers.openai._OpenAI", MagicMock()):
            assert OpenAIReviewer(api_key="key").timeout == 60.0

    def test_call_api_returns_first_choice(self):
        client_cls = MagicMock()
        message = SimpleNamespace(content="review text")
        client_cls.return_value.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=message)]
        )
        with patch("revyu_core.providers.openai._OpenAI", client_cls):
            reviewer = OpenAIReviewer(api_key="key")
        assert reviewer.review("+x") == "review text"
        kwargs = client_cls.return_value.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["messages"][0]["role"] == "user"

    def test_no_choices_raises(self):
        client_cls = MagicMock()
        client_cls.return_value.chat.completions.create.return_value = SimpleNamespace(choices=[])
        with patch("revyu_core.providers.openai._OpenAI", client_cls):
            reviewer = OpenAIReviewer(api_key="key")
        with pytest.raises(ReviewError):
            reviewer.review("+x")

    def test_model_is_gpt(self):
        assert "gpt" in OpenAIReviewer.MODEL


class TestAnthropicReviewer:
    def test_raises_import_error_without_sdk(self):
        """AnthropicReviewer.__init__ must raise if the anthropic package is absent."""
        with patch.dict("sys.modules", {"anthropic": None}):
            with pytest.raises(ImportError):
                AnthropicReviewer(api_key="key")

    def test_model_is_claude(self):
        assert "claude" in AnthropicReviewer.MODEL


class TestGetReviewer:
    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown model provider"):
            get_reviewer({"model": "mystery"}, api_key="key")

    def test_openai_provider_uses_config(self):
        with patch("revyu_core.providers.openai._OpenAI", MagicMock()):
            reviewer = get_reviewer({"model": "openai", "timeout": 5, "max_tokens": 100}, api_key="key")
        assert isinstance(reviewer, OpenAIReviewer)
        assert reviewer.timeout == 5
        assert reviewer.MAX_TOKENS == 100
