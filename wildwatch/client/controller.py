from __future__ import annotations

import logging
from typing import Optional, Tuple

from wildwatch.errors import ExportFailure, PermissionDenied
from wildwatch.reports.map_view import MARKER_DELTA, STARTUP_DELTA, Region, render_map
from wildwatch.reports.markers import Marker
from wildwatch.reports.state import ReportSession
from wildwatch.reports.ux import build_location_banner, build_reports_screen

from . import capture
from .capture import PickedMedia
from .location import LocationProvider, locate
from .speech import Speaker
from .upload import SubmitOutcome, UploadClient


class FieldApp:
    """
    One running field session.

    Holds the device location (read once in start()), the report session,
    the map region and the last analysis text. `uploading` is advisory:
    it tells the UI a submission is running but does not block another.
    """

    def __init__(
        self,
        client: UploadClient,
        location_provider: LocationProvider,
        session: Optional[ReportSession] = None,
        speaker: Optional[Speaker] = None,
    ) -> None:
        self.client = client
        self.location_provider = location_provider
        self.session = session or ReportSession()
        self.speaker = speaker or Speaker()

        self.location: Optional[Tuple[float, float]] = None
        self.location_error: Optional[str] = None
        self.region: Optional[Region] = None
        self.analysis: str = ""
        self.uploading: bool = False
        self.marker_coords: Optional[Tuple[float, float]] = None

    # ------------------------------------------------------------------ #
    # Start-up
    # ------------------------------------------------------------------ #
    def start(self) -> None:
        """Ask for the location once. A refusal leaves the map unavailable."""
        try:
            self.location = locate(self.location_provider)
        except PermissionDenied as e:
            self.location_error = e.message
            return
        self.region = Region.around(*self.location, STARTUP_DELTA)

    @property
    def location_banner(self) -> str:
        return build_location_banner(self.location, self.location_error)

    @property
    def map_available(self) -> bool:
        return self.location is not None and self.region is not None

    # ------------------------------------------------------------------ #
    # Picking
    # ------------------------------------------------------------------ #
    def pick_image(self, path: Optional[str]) -> Optional[SubmitOutcome]:
        try:
            media = capture.pick_image(path)
        except PermissionDenied as e:
            self.analysis = e.message
            return None
        if media is None:
            return None
        self.speaker.stop()
        return self.send(media, "image")

    def pick_audio(self, path: Optional[str]) -> Optional[SubmitOutcome]:
        try:
            media = capture.pick_audio(path)
        except PermissionDenied as e:
            self.analysis = e.message
            return None
        if media is None:
            return None
        self.speaker.stop()
        return self.send(media, "audio")

    # ------------------------------------------------------------------ #
    # Upload
    # ------------------------------------------------------------------ #
    def send(self, media: PickedMedia, kind: str) -> SubmitOutcome:
        """
        Upload one file, speak the answer and record a marker when the
        relay echoed coordinates back.
        """
        self.uploading = True
        self.analysis = ""
        self.marker_coords = None
        try:
            outcome = self.client.submit(media, kind, self.location)
            self.analysis = outcome.message
            self.speaker.speak(outcome.message)

            if outcome.ok and outcome.has_coordinates:
                self._record(outcome, media, kind)
        finally:
            self.uploading = False
        return outcome

    def _record(self, outcome, media: PickedMedia, kind: str) -> Optional[Marker]:
        try:
            latitude, longitude = outcome.coordinates()
        except ValueError as e:
            logging.warning("[SESSION] unusable coordinates in response: %s", e)
            return None

        marker = self.session.add(
            latitude=latitude,
            longitude=longitude,
            kind=kind,
            analysis=outcome.analysis,
            uri=media.uri if kind == "image" else None,
        )
        self.region = Region.around(latitude, longitude, MARKER_DELTA)
        self.marker_coords = (latitude, longitude)
        logging.info("[SESSION] marker %d (%s) recorded", marker.id, kind)
        return marker

    # ------------------------------------------------------------------ #
    # Views
    # ------------------------------------------------------------------ #
    def set_filter(self, kind: str) -> None:
        self.session.set_active_kind(kind)

    def reports_text(self) -> str:
        return build_reports_screen(self.session.snapshot())

    def render_map(self, path: str) -> Optional[str]:
        """Write the filtered map to `path`; None when location is unavailable."""
        if not self.map_available:
            return None
        return render_map(
            self.session.visible_markers(),
            self.region,
            path,
            user_location=self.location,
        )

    def export_pdf(self, path: str) -> Tuple[bool, str]:
        """
        Export every report. Returns (ok, message) where message is either
        the written path or the text to show the user.
        """
        try:
            return True, self.session.export_snapshot(path)
        except ExportFailure as e:
            return False, e.message
