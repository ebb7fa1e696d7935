# wildwatch/reports/__init__.py
from .markers import Marker, MARKER_KINDS
from .state import ReportSession
from .ux import (
    build_reports_screen,
    build_location_banner,
)

__all__ = [
    "Marker",
    "MARKER_KINDS",
    "ReportSession",
    "build_reports_screen",
    "build_location_banner",
]
