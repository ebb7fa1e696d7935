"""
Speech-to-text (Audio → Text)

Streams the renamed temp file to the hosted transcription model. The
file must carry a real audio extension; the API picks its decoder from it.
"""

from __future__ import annotations

from typing import Any, Optional

from wildwatch import config
from wildwatch.services.openai_client import get_client


def perform_stt(path: str, client: Optional[Any] = None) -> str:
    """
    Transcribe an audio file.

    Args:
        path (str): Local path with an audio extension (.mp3, .wav, ...).
        client: OpenAI client; the shared lazy client when omitted.

    Returns:
        str: Plain-text transcript (may be empty).
    """
    client = client or get_client()
    with open(path, "rb") as audio_stream:
        transcript = client.audio.transcriptions.create(
            model=config.STT_MODEL,
            file=audio_stream,
            response_format="text",
        )
    # response_format="text" returns a plain str; older SDKs wrap it
    if isinstance(transcript, str):
        return transcript
    return getattr(transcript, "text", "") or ""
