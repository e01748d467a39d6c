from __future__ import annotations

from revyu_core.providers.base import BaseReviewer

PROVIDERS = ("openai", "anthropic")


def get_reviewer(config: dict, api_key: str) -> BaseReviewer:
    """Build the reviewer selected by ``config["model"]``."""
    model = config["model"]
    timeout = config.get("timeout")
    if model == "openai":
        from revyu_core.providers.openai import OpenAIReviewer

        reviewer: BaseReviewer = OpenAIReviewer(api_key=api_key, timeout=timeout)
    elif model == "anthropic":
        from revyu_core.providers.anthropic import AnthropicReviewer

        reviewer = AnthropicReviewer(api_key=api_key, timeout=timeout)
    else:
        raise ValueError(f"Unknown model provider: {model!r}. Choose 'openai' or 'anthropic'.")

    max_tokens = config.get("max_tokens")
    if max_tokens:
        reviewer.MAX_TOKENS = int(max_tokens)
    return reviewer
