"""
Map rendering of the filter view (folium).

Satellite tiles from ArcGIS World Imagery, one pin per visible marker:
red for images, blue for audio.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import folium

from .markers import Marker
from .ux import PIN_COLORS, build_callout_html, callout_title

TILE_URL = (
    "https://server.arcgisonline.com/ArcGIS/rest/services/"
    "World_Imagery/MapServer/tile/{z}/{y}/{x}"
)
TILE_ATTRIBUTION = "Tiles &copy; Esri, World Imagery"
MAX_ZOOM = 19

STARTUP_DELTA = 0.01
MARKER_DELTA = 0.005


@dataclass(frozen=True)
class Region:
    """Map viewport: centre plus the span of degrees shown."""
    latitude: float
    longitude: float
    latitude_delta: float = STARTUP_DELTA
    longitude_delta: float = STARTUP_DELTA

    @classmethod
    def around(cls, latitude: float, longitude: float, delta: float) -> "Region":
        return cls(latitude, longitude, delta, delta)

    @property
    def zoom(self) -> int:
        span = max(self.latitude_delta, self.longitude_delta, 1e-9)
        return max(0, min(MAX_ZOOM, int(round(math.log2(360.0 / span)))))


def build_map(
    markers: Iterable[Marker],
    region: Region,
    user_location: Optional[Tuple[float, float]] = None,
) -> folium.Map:
    m = folium.Map(
        location=[region.latitude, region.longitude],
        zoom_start=region.zoom,
        tiles=TILE_URL,
        attr=TILE_ATTRIBUTION,
        max_zoom=MAX_ZOOM,
    )

    if user_location is not None:
        folium.Marker(
            location=list(user_location),
            tooltip="Your location",
            icon=folium.Icon(color="green"),
        ).add_to(m)

    for marker in markers:
        folium.Marker(
            location=[marker.latitude, marker.longitude],
            tooltip=callout_title(marker),
            popup=folium.Popup(build_callout_html(marker), max_width=280),
            icon=folium.Icon(color=PIN_COLORS[marker.type]),
        ).add_to(m)

    return m


def render_map(
    markers: Iterable[Marker],
    region: Region,
    path: str,
    user_location: Optional[Tuple[float, float]] = None,
) -> str:
    build_map(markers, region, user_location=user_location).save(path)
    return path
