# wildwatch/reports/ux.py
from __future__ import annotations

import html
from typing import Iterable, List, Optional, Tuple

from wildwatch.utils.geo import fmt, fmt_pair

from .markers import Marker

REPORT_TITLES = {"image": "Image Report", "audio": "Audio Report"}
CALLOUT_TITLES = {"image": "Animal Image", "audio": "Audio Recording"}
PIN_COLORS = {"image": "red", "audio": "blue"}

PDF_TITLE = "Wildlife Sightings Report"
NO_REPORTS_YET = "No reports yet."
FETCHING_LOCATION = "Fetching location..."


def report_title(marker: Marker) -> str:
    return REPORT_TITLES[marker.type]


def callout_title(marker: Marker) -> str:
    return CALLOUT_TITLES[marker.type]


def location_line(marker: Marker) -> str:
    return f"Location: {fmt_pair(marker.latitude, marker.longitude)}"


def build_location_banner(
    coords: Optional[Tuple[float, float]],
    error: Optional[str] = None,
) -> str:
    """
    Top-of-screen status line: the device position, or why it is missing.
    """
    if coords is None:
        return error or FETCHING_LOCATION
    latitude, longitude = coords
    return f"Latitude: {fmt(latitude)}, Longitude: {fmt(longitude)}"


def build_report_entry(marker: Marker) -> List[str]:
    lines = [
        marker.timestamp,
        report_title(marker),
        marker.analysis,
    ]
    if marker.uri:
        lines.append(f"Image: {marker.uri}")
    lines.append(location_line(marker))
    return lines


def build_reports_screen(markers: Iterable[Marker]) -> str:
    """
    Plain-text listing of every report, oldest first.
    """
    markers = list(markers)
    lines = ["All Reports", ""]
    if not markers:
        lines.append(NO_REPORTS_YET)
        return "\n".join(lines)

    for marker in markers:
        lines.extend(build_report_entry(marker))
        lines.append("")
    return "\n".join(lines).rstrip()


def build_callout_html(marker: Marker) -> str:
    """Popup body for a map pin."""
    parts = [f"<b>{callout_title(marker)}</b>"]
    if marker.uri:
        parts.append(f'<img src="{html.escape(marker.uri)}" style="width:150px;height:100px;">')
    parts.append(html.escape(marker.analysis))
    parts.append(html.escape(marker.timestamp))
    parts.append(fmt_pair(marker.latitude, marker.longitude))
    return "<br>".join(parts)
