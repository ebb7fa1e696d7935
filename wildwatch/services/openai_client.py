from __future__ import annotations

import logging
import os
from typing import Optional

from openai import OpenAI

from wildwatch.screening.prompts import NO_ANALYSIS

# Shared by the vision, transcription and classifier calls; built on first use.
_client: Optional[OpenAI] = None


def get_client() -> OpenAI:
    """
    Return the relay's OpenAI client, creating it on the first model call.

    The app factory can run without OPENAI_API_KEY (create_app() accepts an
    injected client instead); only a request that actually reaches a model
    fails when the key is absent.
    """
    global _client
    if _client is None:
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            logging.error("[OPENAI] OPENAI_API_KEY is not set; media cannot be forwarded.")
            raise RuntimeError("OPENAI_API_KEY is not set")
        _client = OpenAI(api_key=api_key)
    return _client


def first_message_text(response, default: str = NO_ANALYSIS) -> str:
    """Pull the first choice's text out of a chat completion, or `default`."""
    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError):
        return default
    return content if content else default
