from __future__ import annotations

from types import SimpleNamespace
from typing import Any, List

import pytest

from wildwatch.main import create_app
from wildwatch.screening.policy import RejectionPolicy


class _Completions:
    def __init__(self, owner: "FakeOpenAI") -> None:
        self.owner = owner

    def create(self, **kwargs: Any) -> Any:
        self.owner.chat_calls.append(kwargs)
        if self.owner.chat_error is not None:
            raise self.owner.chat_error
        message = SimpleNamespace(content=self.owner.chat_reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class _Transcriptions:
    def __init__(self, owner: "FakeOpenAI") -> None:
        self.owner = owner

    def create(self, **kwargs: Any) -> Any:
        f = kwargs["file"]
        self.owner.stt_calls.append({**kwargs, "file": f.name, "data": f.read()})
        if self.owner.stt_error is not None:
            raise self.owner.stt_error
        return self.owner.transcript


class FakeOpenAI:
    """Stands in for openai.OpenAI: records calls, returns canned text."""

    def __init__(self, chat_reply: str = "The animal is not in distress", transcript: str = "") -> None:
        self.chat_reply = chat_reply
        self.transcript = transcript
        self.chat_error: Exception | None = None
        self.stt_error: Exception | None = None
        self.chat_calls: List[dict] = []
        self.stt_calls: List[dict] = []
        self.chat = SimpleNamespace(completions=_Completions(self))
        self.audio = SimpleNamespace(transcriptions=_Transcriptions(self))


@pytest.fixture
def fake_openai() -> FakeOpenAI:
    return FakeOpenAI()


@pytest.fixture
def upload_dir(tmp_path):
    d = tmp_path / "uploads"
    d.mkdir()
    return d


@pytest.fixture
def app(upload_dir, fake_openai):
    app = create_app(upload_dir=str(upload_dir), openai_client=fake_openai, policy=RejectionPolicy())
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
