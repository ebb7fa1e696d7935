from __future__ import annotations

import os
from typing import Optional

# ================================
# HELPERS
# ================================


def _as_int(value: Optional[str], default: int) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default


def _as_float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value is not None else default
    except ValueError:
        return default


# ================================
# RELAY
# ================================
VISION_MODEL = os.getenv("WILDWATCH_VISION_MODEL", "gpt-4o")
CLASSIFIER_MODEL = os.getenv("WILDWATCH_CLASSIFIER_MODEL", "gpt-4o")
STT_MODEL = os.getenv("WILDWATCH_STT_MODEL", "whisper-1")

MAX_TOKENS = _as_int(os.getenv("WILDWATCH_MAX_TOKENS"), 300)
CLASSIFIER_TEMPERATURE = _as_float(os.getenv("WILDWATCH_TEMPERATURE"), 0.5)

UPLOAD_DIR = os.getenv("WILDWATCH_UPLOAD_DIR", "./uploads")
PORT = _as_int(os.getenv("PORT"), 3000)

# ================================
# CLIENT
# ================================
BACKEND_URL = os.getenv("WILDWATCH_BACKEND_URL", f"http://localhost:{PORT}")
REQUEST_TIMEOUT = _as_float(os.getenv("WILDWATCH_TIMEOUT"), 60.0)
TIMEZONE = os.getenv("WILDWATCH_TIMEZONE", "UTC")


def device_coordinates() -> Optional[tuple[float, float]]:
    """
    Return the configured device position, or None when it is not set.

    Read at call time so a CLI session picks up the current environment.
    """
    lat = os.getenv("WILDWATCH_LATITUDE")
    lon = os.getenv("WILDWATCH_LONGITUDE")
    if lat is None or lon is None:
        return None
    try:
        return float(lat), float(lon)
    except ValueError:
        return None


# ================================
# TRANSCRIPT SCREENING
# ================================


def min_transcript_length() -> int:
    return _as_int(os.getenv("WILDWATCH_MIN_TRANSCRIPT_LENGTH"), 8)


def max_reject_tokens() -> int:
    return _as_int(os.getenv("WILDWATCH_MAX_REJECT_TOKENS"), 2)
