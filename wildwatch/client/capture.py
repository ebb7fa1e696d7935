from __future__ import annotations

import logging
import mimetypes
import os
from dataclasses import dataclass
from typing import Optional

from wildwatch.errors import PermissionDenied

MEDIA_PERMISSION_MESSAGE = "Permission to access media library is required!"


@dataclass(frozen=True)
class PickedMedia:
    """A file chosen by the user: where it is and what the picker says it is."""
    uri: str
    name: Optional[str] = None
    mime_type: Optional[str] = None

    @property
    def path(self) -> str:
        if self.uri.startswith("file://"):
            return self.uri[len("file://"):]
        return self.uri


def _describe(path: str) -> PickedMedia:
    mime_type, _ = mimetypes.guess_type(path)
    return PickedMedia(uri=path, name=os.path.basename(path), mime_type=mime_type)


def _check_access(path: str) -> None:
    if not os.path.isfile(path) or not os.access(path, os.R_OK):
        raise PermissionDenied(MEDIA_PERMISSION_MESSAGE)


def pick_image(path: Optional[str]) -> Optional[PickedMedia]:
    """
    Resolve a user-selected image. None means the picker was cancelled.

    Raises PermissionDenied if the file cannot be read.
    """
    if not path:
        return None
    _check_access(path)
    return _describe(path)


def pick_audio(path: Optional[str]) -> Optional[PickedMedia]:
    """
    Resolve a user-selected recording. Files the picker would not offer
    (known non-audio types) count as a cancelled pick.
    """
    if not path:
        return None
    _check_access(path)
    media = _describe(path)
    if media.mime_type and not media.mime_type.startswith("audio/"):
        logging.warning("[CAPTURE] %s is %s, not audio; ignoring", path, media.mime_type)
        return None
    return media


def guess_kind(path: str) -> Optional[str]:
    """'image' / 'audio' from the file's MIME type, or None if it is neither."""
    mime_type, _ = mimetypes.guess_type(path)
    if not mime_type:
        return None
    if mime_type.startswith("image/"):
        return "image"
    if mime_type.startswith("audio/"):
        return "audio"
    return None
