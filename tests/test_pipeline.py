import os

import pytest

from wildwatch.errors import UpstreamFailure
from wildwatch.media.models import RelayJob
from wildwatch.media.pipeline import run_audio_job, run_image_job
from wildwatch.media.storage import audio_extension
from wildwatch.screening.prompts import UNCLEAR_AUDIO_MESSAGE


def _job(tmp_path, media_type, data=b"bytes", **kwargs):
    path = tmp_path / "upload"
    path.write_bytes(data)
    return RelayJob(media_type=media_type, path=str(path), **kwargs)


@pytest.mark.parametrize(
    "mimetype, filename, ext",
    [
        ("audio/mpeg", "x.wav", ".mp3"),
        ("audio/wav", "x.mp3", ".wav"),
        ("audio/ogg", "call.ogg", ".ogg"),
        ("application/octet-stream", "noext", ".mp3"),
        ("", "", ".mp3"),
    ],
)
def test_audio_extension(mimetype, filename, ext):
    assert audio_extension(mimetype, filename) == ext


def test_unknown_media_type():
    with pytest.raises(ValueError):
        RelayJob(media_type="video", path="/tmp/x")


def test_image_job_walks_states(tmp_path, fake_openai):
    job = _job(tmp_path, "image")
    job.advance("validated")
    run_image_job(job, client=fake_openai)

    assert job.history == ["received", "validated", "forwarded", "cleaned", "responded"]
    assert not os.path.exists(job.path)


def test_image_job_failure_still_deletes_file(tmp_path, fake_openai):
    fake_openai.chat_error = RuntimeError("upstream down")
    job = _job(tmp_path, "image")
    job.advance("validated")

    with pytest.raises(UpstreamFailure) as exc:
        run_image_job(job, client=fake_openai)

    assert exc.value.details == "upstream down"
    assert job.error == "upstream down"
    assert not os.path.exists(job.path)


def test_audio_job_rejected_path(tmp_path, fake_openai):
    fake_openai.transcript = "hello"
    job = _job(tmp_path, "audio", mimetype="audio/wav", filename="a.wav")
    run_audio_job(job, client=fake_openai)

    assert job.analysis == UNCLEAR_AUDIO_MESSAGE
    assert job.history == [
        "received", "renamed", "transcribed", "filtered", "rejected", "cleaned", "responded",
    ]
    assert job.path.endswith(".wav")
    assert not os.path.exists(job.path)
    assert fake_openai.chat_calls == []


def test_audio_job_classified_path(tmp_path, fake_openai):
    fake_openai.transcript = "a wolf howling again and again in the night"
    fake_openai.chat_reply = "This behavior is normal, no distress recognized."
    job = _job(tmp_path, "audio", mimetype="audio/mpeg", latitude="1", longitude="2")
    run_audio_job(job, client=fake_openai)

    assert "classified" in job.history
    assert job.to_response() == {
        "analysis": "This behavior is normal, no distress recognized.",
        "latitude": "1",
        "longitude": "2",
    }
    assert not os.path.exists(job.path)
