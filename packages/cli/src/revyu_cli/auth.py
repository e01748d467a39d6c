"""API key resolution for the completion providers.

Resolution order (stops at first success):
  1. The provider's environment variable (OPENAI_API_KEY / ANTHROPIC_API_KEY)
  2. The same variable in a .env file in the current directory
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import dotenv_values

from revyu_core.config import PROVIDER_KEY_ENV

logger = logging.getLogger(__name__)


def resolve_api_key(provider: str, env_file: str = ".env") -> str | None:
    """Return the API key for ``provider`` or None if no source has one.

    Never raises; callers should check for None and emit a UsageError.
    """
    var = PROVIDER_KEY_ENV.get(provider)
    if var is None:
        return None

    key = os.environ.get(var)
    if key:
        return key

    path = Path(env_file)
    if path.is_file():
        key = dotenv_values(path).get(var)
        if key:
            logger.debug("Resolved %s from %s.", var, path)
            return key

    return None
