"""
Media relay pipeline.

    image: read → base64 → vision model → analysis
    audio: rename → transcribe → screen → (reject | classify) → analysis

Both runners own the temp file for the whole job and delete it on every
exit path. Upstream errors are re-raised as UpstreamFailure carrying the
original message as `details`.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from wildwatch.errors import UpstreamFailure, ValidationReject
from wildwatch.media.models import AUDIO, IMAGE, RelayJob
from wildwatch.media.storage import load_media_file, rename_with_extension, temporary_upload
from wildwatch.media.stt import perform_stt
from wildwatch.media.vision import analyze_image
from wildwatch.screening.classifier import classify_transcript
from wildwatch.screening.policy import DEFAULT_POLICY, RejectionPolicy

logger = logging.getLogger(__name__)


def run_image_job(job: RelayJob, client: Optional[Any] = None) -> RelayJob:
    """Assess one uploaded image. The job must be in the "validated" state."""
    if job.media_type != IMAGE:
        raise ValueError("run_image_job() needs an image job")

    with temporary_upload(job):
        try:
            image_bytes = load_media_file(job.path)
            job.advance("forwarded")
            job.analysis = analyze_image(image_bytes, client=client)
        except Exception as e:  # noqa: BLE001
            job.error = str(e)
            logger.exception("[RELAY] image job %s failed", job.id)
            raise UpstreamFailure("Failed to analyze image", details=str(e)) from e

    job.advance("responded")
    return job


def run_audio_job(
    job: RelayJob,
    client: Optional[Any] = None,
    policy: Optional[RejectionPolicy] = None,
) -> RelayJob:
    """
    Transcribe, screen and classify one uploaded recording.

    A transcript rejected by `policy` short-circuits with the fixed
    unclear-audio message and no classification call.
    """
    if job.media_type != AUDIO:
        raise ValueError("run_audio_job() needs an audio job")
    policy = policy or DEFAULT_POLICY

    with temporary_upload(job):
        try:
            rename_with_extension(job)
            job.advance("renamed")

            job.transcript = perform_stt(job.path, client=client)
            job.advance("transcribed")
            logger.info("[STT] job %s transcript: %r", job.id, job.transcript)

            try:
                transcript = policy.screen(job.transcript)
            except ValidationReject as rejected:
                job.advance("filtered")
                logger.info("[SCREEN] job %s rejected (%s)", job.id, rejected.details)
                job.analysis = rejected.message
                job.advance("rejected")
            else:
                job.advance("filtered")
                job.analysis = classify_transcript(transcript, client=client)
                job.advance("classified")
        except Exception as e:  # noqa: BLE001
            job.error = str(e)
            logger.exception("[RELAY] audio job %s failed", job.id)
            raise UpstreamFailure("Failed to analyze audio", details=str(e)) from e

    job.advance("responded")
    return job
