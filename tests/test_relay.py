from __future__ import annotations

import base64
import io
import os

from wildwatch.screening.prompts import (
    DISTRESS_SENTENCE,
    IMAGE_PROMPT,
    NORMAL_SENTENCE,
    UNCLEAR_AUDIO_MESSAGE,
)

JPEG = b"\xff\xd8\xff\xe0fakejpeg"
WAV = b"RIFF....WAVEfmt fake"


def _image(data: bytes = JPEG, name: str = "lion.jpg"):
    return (io.BytesIO(data), name, "image/jpeg")


def _audio(data: bytes = WAV, name: str = "call.wav", mimetype: str = "audio/wav"):
    return (io.BytesIO(data), name, mimetype)


def _post(client, path, **fields):
    return client.post(path, data=fields, content_type="multipart/form-data")


# ---------------------------------------------------------------------------
# liveness
# ---------------------------------------------------------------------------

def test_liveness(client):
    resp = client.get("/test")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_cors_header_present(client):
    resp = client.get("/test", headers={"Origin": "http://example.com"})
    assert resp.headers.get("Access-Control-Allow-Origin") in {"*", "http://example.com"}


# ---------------------------------------------------------------------------
# /analyze
# ---------------------------------------------------------------------------

def test_analyze_without_file_is_400_and_skips_model(client, fake_openai):
    resp = _post(client, "/analyze", latitude="1.0", longitude="2.0")
    assert resp.status_code == 400
    assert "error" in resp.get_json()
    assert fake_openai.chat_calls == []


def test_analyze_sends_base64_image_with_prompt(client, fake_openai, upload_dir):
    fake_openai.chat_reply = "The animal is in distress! It is limping."
    resp = _post(client, "/analyze", file=_image(), latitude="12.34567", longitude="-98.76543")

    assert resp.status_code == 200
    assert resp.get_json() == {
        "analysis": "The animal is in distress! It is limping.",
        "latitude": "12.34567",
        "longitude": "-98.76543",
    }

    (call,) = fake_openai.chat_calls
    assert call["model"] == "gpt-4o"
    assert call["max_tokens"] == 300
    content = call["messages"][0]["content"]
    assert content[0] == {"type": "text", "text": IMAGE_PROMPT}
    expected = "data:image/jpeg;base64," + base64.b64encode(JPEG).decode()
    assert content[1]["image_url"]["url"] == expected

    assert os.listdir(upload_dir) == []


def test_analyze_echoes_coordinates_verbatim(client):
    resp = _post(client, "/analyze", file=_image(), latitude="12.300", longitude="+45.0")
    body = resp.get_json()
    assert body["latitude"] == "12.300"
    assert body["longitude"] == "+45.0"


def test_analyze_without_coordinates_omits_them(client):
    body = _post(client, "/analyze", file=_image()).get_json()
    assert "latitude" not in body
    assert "longitude" not in body


def test_analyze_rejects_malformed_coordinates(client, fake_openai, upload_dir):
    resp = _post(client, "/analyze", file=_image(), latitude="north", longitude="2")
    assert resp.status_code == 400
    assert "latitude" in resp.get_json()["error"]
    assert fake_openai.chat_calls == []
    assert os.listdir(upload_dir) == []


def test_analyze_rejects_out_of_range_longitude(client):
    resp = _post(client, "/analyze", file=_image(), latitude="10", longitude="181")
    assert resp.status_code == 400


def test_analyze_empty_completion(client, fake_openai):
    fake_openai.chat_reply = None
    body = _post(client, "/analyze", file=_image()).get_json()
    assert body["analysis"] == "No analysis returned."


def test_analyze_upstream_failure_is_500_and_cleans_up(client, fake_openai, upload_dir):
    fake_openai.chat_error = RuntimeError("rate limited")
    resp = _post(client, "/analyze", file=_image(), latitude="1", longitude="1")

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to analyze image", "details": "rate limited"}
    assert os.listdir(upload_dir) == []


# ---------------------------------------------------------------------------
# /analyze-audio
# ---------------------------------------------------------------------------

def test_audio_without_file_is_400(client, fake_openai):
    resp = _post(client, "/analyze-audio")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "No audio file uploaded"}
    assert fake_openai.stt_calls == []


def test_audio_numeric_noise_is_rejected_without_classification(client, fake_openai, upload_dir):
    fake_openai.transcript = "42.0 cm"
    resp = _post(client, "/analyze-audio", file=_audio(), latitude="1.5", longitude="2.5")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["analysis"] == UNCLEAR_AUDIO_MESSAGE
    assert body["latitude"] == "1.5"
    assert body["longitude"] == "2.5"
    assert len(fake_openai.stt_calls) == 1
    assert fake_openai.chat_calls == []
    assert os.listdir(upload_dir) == []


def test_audio_clear_transcript_is_classified(client, fake_openai, upload_dir):
    fake_openai.transcript = "the lion is roaring loudly and pacing"
    fake_openai.chat_reply = DISTRESS_SENTENCE
    resp = _post(client, "/analyze-audio", file=_audio(), latitude="-1.28333", longitude="36.81667")

    assert resp.status_code == 200
    assert resp.get_json() == {
        "analysis": DISTRESS_SENTENCE,
        "latitude": "-1.28333",
        "longitude": "36.81667",
    }

    (call,) = fake_openai.chat_calls
    assert call["temperature"] == 0.5
    system, user = call["messages"]
    assert NORMAL_SENTENCE in system["content"] and DISTRESS_SENTENCE in system["content"]
    assert user["content"] == "Animal vocalization transcription: the lion is roaring loudly and pacing"
    assert os.listdir(upload_dir) == []


def test_audio_file_renamed_with_extension_before_transcription(client, fake_openai):
    fake_openai.transcript = "uh"
    _post(client, "/analyze-audio", file=_audio(name="clip", mimetype="audio/mpeg"))

    (call,) = fake_openai.stt_calls
    assert call["file"].endswith(".mp3")
    assert call["model"] == "whisper-1"
    assert call["response_format"] == "text"
    assert call["data"] == WAV


def test_audio_extension_falls_back_to_filename(client, fake_openai):
    fake_openai.transcript = "uh"
    _post(client, "/analyze-audio", file=_audio(name="call.m4a", mimetype="audio/x-m4a"))
    assert fake_openai.stt_calls[0]["file"].endswith(".m4a")


def test_audio_transcription_failure_is_500(client, fake_openai, upload_dir):
    fake_openai.stt_error = RuntimeError("bad audio")
    resp = _post(client, "/analyze-audio", file=_audio())

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to analyze audio", "details": "bad audio"}
    assert os.listdir(upload_dir) == []
