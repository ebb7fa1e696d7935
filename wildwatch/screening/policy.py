from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Pattern

from wildwatch import config
from wildwatch.errors import ValidationReject

from .prompts import UNCLEAR_AUDIO_MESSAGE

FILLER_UTTERANCES = frozenset(
    {"you", "uh", "uh uh", "hello", "hi", "hey, oh, oh oh you"}
)

# Whisper's favourite hallucinations on silence: bare numbers and "cm".
NUMERIC_NOISE = re.compile(r"^[\d\s.cm]+$", re.ASCII)


@dataclass(frozen=True)
class RejectionPolicy:
    """
    Heuristics for discarding low-information transcripts before a
    classification call is spent on them.

    A transcript is rejected when its lowercased, trimmed form:
    - is shorter than `min_length` characters, or
    - is only digits / whitespace / '.' / 'c' / 'm', or
    - is exactly one of `fillers`, or
    - has at most `max_tokens` space-separated tokens.
    """

    min_length: int = 8
    max_tokens: int = 2
    fillers: FrozenSet[str] = field(default=FILLER_UTTERANCES)
    noise_pattern: Pattern[str] = field(default=NUMERIC_NOISE)

    @classmethod
    def from_env(cls) -> "RejectionPolicy":
        return cls(
            min_length=config.min_transcript_length(),
            max_tokens=config.max_reject_tokens(),
        )

    def reason(self, transcript: Optional[str]) -> Optional[str]:
        """Return why the transcript is rejected, or None if it passes."""
        cleaned = (transcript or "").strip().lower()

        if len(cleaned) < self.min_length:
            return "too_short"
        if self.noise_pattern.match(cleaned):
            return "numeric_noise"
        if cleaned in self.fillers:
            return "filler"
        # split(" ") on purpose: runs of spaces count as empty tokens
        if len(cleaned.split(" ")) <= self.max_tokens:
            return "too_few_words"
        return None

    def rejects(self, transcript: Optional[str]) -> bool:
        return self.reason(transcript) is not None

    def screen(self, transcript: Optional[str]) -> str:
        """
        Return the transcript if it is worth classifying.

        Raises:
            ValidationReject: carrying the unclear-audio message and the reason.
        """
        reason = self.reason(transcript)
        if reason is not None:
            raise ValidationReject(UNCLEAR_AUDIO_MESSAGE, details=reason)
        return transcript or ""


DEFAULT_POLICY = RejectionPolicy()
