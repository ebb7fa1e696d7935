"""
Transcript screening and classification.

- RejectionPolicy decides whether a transcript is worth a model call.
- classify_transcript asks the chat model for one of two canonical sentences.

Nothing in this package should talk directly to Flask or touch the filesystem.
"""

from .policy import RejectionPolicy, DEFAULT_POLICY
from .prompts import NORMAL_SENTENCE, DISTRESS_SENTENCE, UNCLEAR_AUDIO_MESSAGE

__all__ = [
    "RejectionPolicy",
    "DEFAULT_POLICY",
    "NORMAL_SENTENCE",
    "DISTRESS_SENTENCE",
    "UNCLEAR_AUDIO_MESSAGE",
]
