# wildwatch/client/upload.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

import requests

from wildwatch import config
from wildwatch.screening.prompts import NO_ANALYSIS
from wildwatch.utils.geo import parse_pair

from .capture import PickedMedia
from .validator import validate_response

ENDPOINTS = {"image": "analyze", "audio": "analyze-audio"}
DEFAULT_NAMES = {"image": "image.jpg", "audio": "audiofile.wav"}

UPLOAD_ERROR_MESSAGE = "Error uploading file."


@dataclass(frozen=True)
class AnalysisResult:
    """
    A relay answer. latitude / longitude are the echoed strings, if any;
    callers parse them with `coordinates()`.
    """
    analysis: str
    latitude: Optional[str] = None
    longitude: Optional[str] = None

    ok = True

    @property
    def message(self) -> str:
        return self.analysis

    @property
    def has_coordinates(self) -> bool:
        return bool(self.latitude) and bool(self.longitude)

    def coordinates(self) -> Tuple[float, float]:
        """Raises ValueError if the echoed strings are not usable degrees."""
        return parse_pair(self.latitude, self.longitude)


@dataclass(frozen=True)
class Failure:
    """Terminal outcome of a submission; `message` is safe to show the user."""
    message: str = UPLOAD_ERROR_MESSAGE
    details: Optional[str] = None
    status: Optional[int] = None

    ok = False


SubmitOutcome = Union[AnalysisResult, Failure]


def upload_mime_type(media: PickedMedia, kind: str) -> str:
    """
    MIME type to declare for the multipart file part.

    Images are always sent as image/jpeg. Audio keeps the picker's type,
    with audio/vnd.wave collapsed to audio/wav and audio/wav as fallback.
    """
    if kind != "audio":
        return "image/jpeg"
    if media.mime_type == "audio/vnd.wave":
        return "audio/wav"
    return media.mime_type or "audio/wav"


def build_form(coordinates: Optional[Tuple[float, float]]) -> Dict[str, str]:
    if coordinates is None:
        return {}
    latitude, longitude = coordinates
    return {"latitude": str(latitude), "longitude": str(longitude)}


class UploadClient:
    """
    Posts one media file at a time to the relay.

    submit() never raises: transport, decoding and schema problems all come
    back as a Failure. There is no retry.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.base_url = (base_url or config.BACKEND_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT

    def endpoint_url(self, kind: str) -> str:
        return f"{self.base_url}/{ENDPOINTS[kind]}"

    def _post(self, url: str, media: PickedMedia, kind: str, data: Dict[str, str]) -> requests.Response:
        name = media.name or DEFAULT_NAMES[kind]
        with open(media.path, "rb") as fh:
            files = {"file": (name, fh, upload_mime_type(media, kind))}
            return requests.post(url, files=files, data=data, timeout=self.timeout)

    def submit(
        self,
        media: PickedMedia,
        kind: str,
        coordinates: Optional[Tuple[float, float]] = None,
    ) -> SubmitOutcome:
        if kind not in ENDPOINTS:
            raise ValueError(f"Unknown media kind: {kind!r}")

        url = self.endpoint_url(kind)
        logging.info("[UPLOAD] %s → %s", media.name or media.uri, url)

        try:
            response = self._post(url, media, kind, build_form(coordinates))
            body: Any = response.json()
        except (requests.RequestException, OSError, ValueError) as e:
            logging.error("[UPLOAD] upload failed: %s", e)
            return Failure(details=str(e))

        ok, err = validate_response(body)
        if not ok:
            logging.error("[UPLOAD] unexpected response shape: %s", err)
            return Failure(details=err, status=response.status_code)

        text = body.get("analysis") or body.get("error") or NO_ANALYSIS

        if response.status_code >= 400 or (body.get("analysis") is None and body.get("error")):
            logging.warning("[UPLOAD] relay answered %s: %s", response.status_code, text)
            return Failure(message=text, details=body.get("details"), status=response.status_code)

        latitude = body.get("latitude")
        longitude = body.get("longitude")
        return AnalysisResult(
            analysis=text,
            latitude=None if latitude is None else str(latitude),
            longitude=None if longitude is None else str(longitude),
        )
