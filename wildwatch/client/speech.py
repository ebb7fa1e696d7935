from __future__ import annotations

import logging
from typing import List, Optional

DEFAULT_PITCH = 1.1
DEFAULT_RATE = 1.0


class Speaker:
    """
    Text-to-speech side channel.

    The base class only logs what would be said; platform front ends
    subclass it and hand the text to a real voice.
    """

    def __init__(self) -> None:
        self.current: Optional[str] = None
        self.spoken: List[str] = []

    def speak(self, text: str, pitch: float = DEFAULT_PITCH, rate: float = DEFAULT_RATE) -> None:
        self.stop()
        self.current = text
        self.spoken.append(text)
        logging.info("[SPEECH] (pitch=%.1f rate=%.1f) %s", pitch, rate, text)

    def stop(self) -> None:
        if self.current is not None:
            logging.debug("[SPEECH] stopped: %s", self.current)
        self.current = None
