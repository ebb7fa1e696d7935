from __future__ import annotations

import itertools
from typing import Callable, List, Optional, Tuple

from wildwatch.utils.time import now_display

from .export import export_pdf
from .markers import MARKER_KINDS, Marker

# One ReportSession lives for the whole process: created at start-up,
# gone at exit. Nothing is persisted.


class ReportSession:
    """
    Ordered, append-only store of the sightings recorded in this session.

    - append() keeps insertion order and never deduplicates
    - filter() is recomputed on every call and preserves order
    - ids come from a monotonic counter, never from the current length
    """

    def __init__(self, clock: Callable[[], str] = now_display) -> None:
        self._markers: List[Marker] = []
        self._ids = itertools.count(1)
        self._clock = clock
        self.active_kind: str = "image"

    def __len__(self) -> int:
        return len(self._markers)

    def __iter__(self):
        return iter(tuple(self._markers))

    def next_id(self) -> int:
        return next(self._ids)

    def add(
        self,
        latitude: float,
        longitude: float,
        kind: str,
        analysis: str,
        uri: Optional[str] = None,
    ) -> Marker:
        """Create a marker with the next id and the current time, then append it."""
        marker = Marker(
            id=self.next_id(),
            latitude=float(latitude),
            longitude=float(longitude),
            type=kind,
            analysis=analysis,
            uri=uri if kind == "image" else None,
            timestamp=self._clock(),
        )
        return self.append(marker)

    def append(self, marker: Marker) -> Marker:
        self._markers.append(marker)
        return marker

    def filter(self, kind: str) -> List[Marker]:
        if kind not in MARKER_KINDS:
            raise ValueError(f"Invalid marker type: {kind!r}")
        return [m for m in self._markers if m.type == kind]

    def set_active_kind(self, kind: str) -> None:
        if kind not in MARKER_KINDS:
            raise ValueError(f"Invalid marker type: {kind!r}")
        self.active_kind = kind

    def visible_markers(self) -> List[Marker]:
        """The filter view shown on the map."""
        return self.filter(self.active_kind)

    def snapshot(self) -> Tuple[Marker, ...]:
        return tuple(self._markers)

    def export_snapshot(self, path: str) -> str:
        """Write every marker (not just the filtered ones) to a PDF at `path`."""
        return export_pdf(self.snapshot(), path)
