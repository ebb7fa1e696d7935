from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MARKER_KINDS = ("image", "audio")


@dataclass(frozen=True)
class Marker:
    """
    One recorded sighting.

    Markers are immutable; the session assigns `id` and `timestamp`
    when it appends them.
    """
    id: int
    latitude: float
    longitude: float
    type: str
    analysis: str
    uri: Optional[str] = None
    timestamp: str = ""

    def __post_init__(self) -> None:
        if self.type not in MARKER_KINDS:
            raise ValueError(f"Invalid marker type: {self.type!r}")
        # only image sightings keep a media reference
        if self.type != "image" and self.uri is not None:
            object.__setattr__(self, "uri", None)
