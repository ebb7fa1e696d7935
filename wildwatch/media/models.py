from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import uuid

IMAGE = "image"
AUDIO = "audio"
MEDIA_KINDS = (IMAGE, AUDIO)

# Image: received → validated → forwarded → cleaned → responded
# Audio: received → renamed → transcribed → filtered → rejected|classified → cleaned → responded
IMAGE_STATES = ("received", "validated", "forwarded", "cleaned", "responded")
AUDIO_STATES = (
    "received",
    "renamed",
    "transcribed",
    "filtered",
    "rejected",
    "classified",
    "cleaned",
    "responded",
)


@dataclass
class RelayJob:
    """
    Internal representation of one upload passing through the relay.

    Fields:
        media_type: "image" or "audio".
        path: Temporary path of the uploaded bytes (changes when renamed).
        filename: Original filename as sent by the client.
        mimetype: MIME type as sent by the client.
        latitude / longitude: Coordinate strings exactly as received.
        status: Current state, see IMAGE_STATES / AUDIO_STATES.
        transcript: Raw speech-to-text output (audio only).
        analysis: Text returned to the client.
        error: Upstream error detail if the job failed.
    """

    media_type: str
    path: str
    filename: str = ""
    mimetype: str = ""

    latitude: Optional[str] = None
    longitude: Optional[str] = None

    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    status: str = "received"
    transcript: Optional[str] = None
    analysis: Optional[str] = None
    error: Optional[str] = None
    history: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.media_type not in MEDIA_KINDS:
            raise ValueError(f"Unknown media type: {self.media_type!r}")
        self.history.append(self.status)

    def advance(self, status: str) -> None:
        allowed = IMAGE_STATES if self.media_type == IMAGE else AUDIO_STATES
        if status not in allowed:
            raise ValueError(f"{status!r} is not a {self.media_type} job state")
        self.status = status
        self.history.append(status)

    def to_response(self) -> Dict[str, Any]:
        """
        JSON body for a successful relay call.

        Coordinates are echoed verbatim; absent ones are left out.
        """
        body: Dict[str, Any] = {"analysis": self.analysis}
        if self.latitude is not None:
            body["latitude"] = self.latitude
        if self.longitude is not None:
            body["longitude"] = self.longitude
        return body
