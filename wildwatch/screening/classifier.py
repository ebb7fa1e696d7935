from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from wildwatch import config
from wildwatch.services.openai_client import first_message_text, get_client

from .prompts import AUDIO_SYSTEM_PROMPT, CANONICAL_SENTENCES, transcript_message

logger = logging.getLogger(__name__)


def build_messages(transcript: str) -> List[Dict[str, Any]]:
    return [
        {"role": "system", "content": AUDIO_SYSTEM_PROMPT},
        {"role": "user", "content": transcript_message(transcript)},
    ]


def classify_transcript(transcript: str, client: Optional[Any] = None) -> str:
    """
    Ask the chat model whether a vocalization sounds like distress.

    The system prompt pins the answer to one of the two canonical
    sentences; anything else is passed through unchanged and logged.
    Exceptions from the API propagate to the caller.
    """
    client = client or get_client()
    response = client.chat.completions.create(
        model=config.CLASSIFIER_MODEL,
        messages=build_messages(transcript),
        max_tokens=config.MAX_TOKENS,
        temperature=config.CLASSIFIER_TEMPERATURE,
    )
    answer = first_message_text(response)
    if answer.strip() not in CANONICAL_SENTENCES:
        logger.warning("[CLASSIFIER] non-canonical answer: %r", answer)
    return answer
