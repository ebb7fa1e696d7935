"""
Temporary storage for uploaded media.

Every upload lands under UPLOAD_DIR with a unique name, so concurrent
requests never share a path. `temporary_upload()` removes the file on
every exit path, including upstream failures.
"""

from __future__ import annotations

import logging
import os
import uuid
from contextlib import contextmanager
from typing import Iterator

from wildwatch.media.models import RelayJob

logger = logging.getLogger(__name__)

AUDIO_EXTENSIONS = {
    "audio/mpeg": ".mp3",
    "audio/wav": ".wav",
}
DEFAULT_AUDIO_EXTENSION = ".mp3"


def ensure_upload_dir(upload_dir: str) -> str:
    os.makedirs(upload_dir, exist_ok=True)
    return upload_dir


def save_media_file(upload, upload_dir: str) -> str:
    """
    Write an incoming upload (werkzeug FileStorage) to a fresh temp path.

    Returns:
        str: The path the bytes were saved to (no extension).
    """
    ensure_upload_dir(upload_dir)
    path = os.path.join(upload_dir, uuid.uuid4().hex)
    upload.save(path)
    logger.info("[STORAGE] saved %s → %s", upload.filename or "<unnamed>", path)
    return path


def load_media_file(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def audio_extension(mimetype: str, filename: str) -> str:
    """
    Pick the extension the transcription API needs to select a decoder.

    audio/mpeg → .mp3, audio/wav → .wav, otherwise the original
    filename's extension, otherwise .mp3.
    """
    if mimetype in AUDIO_EXTENSIONS:
        return AUDIO_EXTENSIONS[mimetype]
    ext = os.path.splitext(filename or "")[1]
    return ext or DEFAULT_AUDIO_EXTENSION


def rename_with_extension(job: RelayJob) -> str:
    """Rename the job's temp file to carry an audio extension; updates job.path."""
    ext = audio_extension(job.mimetype, job.filename)
    renamed = f"{job.path}{ext}"
    os.rename(job.path, renamed)
    job.path = renamed
    return renamed


def delete_media_file(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        return
    except OSError as e:
        logger.warning("[STORAGE] could not delete %s: %s", path, e)


@contextmanager
def temporary_upload(job: RelayJob) -> Iterator[RelayJob]:
    """Yield the job and delete whatever path it ends up with."""
    try:
        yield job
    finally:
        delete_media_file(job.path)
        job.advance("cleaned")
