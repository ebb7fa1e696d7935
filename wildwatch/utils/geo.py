from __future__ import annotations

import math
from typing import Optional, Tuple

LATITUDE_LIMIT = 90.0
LONGITUDE_LIMIT = 180.0


def parse_coordinate(value: Optional[str], limit: float) -> float:
    """
    Parse a coordinate string into degrees.

    Raises ValueError for anything that is not a finite number in [-limit, limit].
    """
    if value is None or not str(value).strip():
        raise ValueError("empty coordinate")
    number = float(value)
    if not math.isfinite(number) or abs(number) > limit:
        raise ValueError(f"coordinate out of range: {value!r}")
    return number


def parse_pair(latitude: Optional[str], longitude: Optional[str]) -> Tuple[float, float]:
    return (
        parse_coordinate(latitude, LATITUDE_LIMIT),
        parse_coordinate(longitude, LONGITUDE_LIMIT),
    )


def fmt(value: float) -> str:
    """Five decimals, the precision used everywhere a coordinate is shown."""
    return f"{value:.5f}"


def fmt_pair(latitude: float, longitude: float) -> str:
    return f"{fmt(latitude)}, {fmt(longitude)}"
