"""Gemini client construction from a caller-supplied credential."""

from __future__ import annotations

import logging

from google import genai
from google.genai import types

from .config import LookmatchConfig
from .config import config as default_config
from .errors import ApiKeyMissingError

logger = logging.getLogger(__name__)


def get_client(api_key: str | None, config: LookmatchConfig | None = None) -> genai.Client:
    """Build a Gemini client for a single call.

    The key is never read from the environment or from global state; each
    caller passes its own.
    A key made only of whitespace counts as missing, which is stricter than
    an emptiness check.

    Args:
        api_key: Gemini API key
        config: Configuration (defaults to the global instance)

    Returns:
        A ``genai.Client`` bound to the key

    Raises:
        ApiKeyMissingError: If the key is None, empty or whitespace
    """
    if not api_key or not api_key.strip():
        raise ApiKeyMissingError()

    config = config or default_config
    if config.request_timeout_ms is not None:
        logger.debug("Creating Gemini client with %d ms timeout", config.request_timeout_ms)
        return genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=config.request_timeout_ms),
        )
    return genai.Client(api_key=api_key)
