from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from flask import Blueprint, current_app, jsonify, request

from wildwatch.errors import BadRequest, UpstreamFailure
from wildwatch.media.models import AUDIO, IMAGE, RelayJob
from wildwatch.media.pipeline import run_audio_job, run_image_job
from wildwatch.media.storage import save_media_file
from wildwatch.utils.geo import LATITUDE_LIMIT, LONGITUDE_LIMIT, parse_coordinate

api = Blueprint("api", __name__)


def _form_coordinates() -> Tuple[Optional[str], Optional[str]]:
    """
    Read latitude/longitude from the multipart form.

    Present values must be numeric and in range; they are returned as the
    original strings so the response echoes exactly what the client sent.
    """
    latitude = request.form.get("latitude")
    longitude = request.form.get("longitude")

    for name, value, limit in (
        ("latitude", latitude, LATITUDE_LIMIT),
        ("longitude", longitude, LONGITUDE_LIMIT),
    ):
        if value is None:
            continue
        try:
            parse_coordinate(value, limit)
        except ValueError:
            raise BadRequest(f"Invalid {name}: {value!r}") from None

    return latitude, longitude


def _new_job(media_type: str, missing_message: str) -> RelayJob:
    upload = request.files.get("file")
    if upload is None or not upload.filename:
        raise BadRequest(missing_message)

    latitude, longitude = _form_coordinates()
    path = save_media_file(upload, current_app.config["UPLOAD_DIR"])
    return RelayJob(
        media_type=media_type,
        path=path,
        filename=upload.filename or "",
        mimetype=upload.mimetype or "",
        latitude=latitude,
        longitude=longitude,
    )


@api.errorhandler(BadRequest)
def _bad_request(e: BadRequest) -> Any:
    logging.warning("[RELAY] bad request: %s", e.message)
    return jsonify({"error": e.message}), 400


@api.errorhandler(UpstreamFailure)
def _upstream_failure(e: UpstreamFailure) -> Any:
    logging.error("[RELAY] upstream failure: %s (%s)", e.message, e.details)
    return jsonify({"error": e.message, "details": e.details}), 500


@api.route("/test", methods=["GET"])
def healthcheck() -> Any:
    return jsonify({"status": "ok"})


@api.route("/analyze", methods=["POST"])
def analyze() -> Any:
    """
    Image analysis endpoint.

    multipart: file (image), latitude, longitude (optional strings)
    → {analysis, latitude?, longitude?}
    """
    job = _new_job(IMAGE, "No file uploaded")
    job.advance("validated")
    logging.info("[RELAY] image job %s from %s", job.id, job.filename or "<unnamed>")

    run_image_job(job, client=current_app.config.get("OPENAI_CLIENT"))
    return jsonify(job.to_response())


@api.route("/analyze-audio", methods=["POST"])
def analyze_audio() -> Any:
    """
    Audio analysis endpoint.

    multipart: file (audio), latitude, longitude (optional strings)
    → {analysis, latitude?, longitude?}
    """
    job = _new_job(AUDIO, "No audio file uploaded")
    logging.info(
        "[RELAY] audio job %s from %s (%s)", job.id, job.filename or "<unnamed>", job.mimetype
    )

    run_audio_job(
        job,
        client=current_app.config.get("OPENAI_CLIENT"),
        policy=current_app.config.get("REJECTION_POLICY"),
    )
    return jsonify(job.to_response())
