from types import SimpleNamespace

import pytest

from wildwatch.screening.classifier import build_messages, classify_transcript
from wildwatch.screening.policy import DEFAULT_POLICY, RejectionPolicy
from wildwatch.errors import ValidationReject
from wildwatch.screening.prompts import DISTRESS_SENTENCE, NO_ANALYSIS, NORMAL_SENTENCE, UNCLEAR_AUDIO_MESSAGE
from wildwatch.services.openai_client import first_message_text


@pytest.mark.parametrize(
    "transcript, reason",
    [
        ("", "too_short"),
        ("   you   ", "too_short"),
        ("42.0 cm", "too_short"),
        ("12345 678 cm", "numeric_noise"),
        ("hey, oh, oh oh you", "filler"),
        ("roaring loudly", "too_few_words"),
        ("ROARING    ", "too_short"),
    ],
)
def test_rejected_transcripts(transcript, reason):
    assert DEFAULT_POLICY.reason(transcript) == reason
    assert DEFAULT_POLICY.rejects(transcript)


def test_clear_transcript_passes():
    assert DEFAULT_POLICY.reason("the lion is roaring loudly and pacing") is None


def test_none_transcript_is_rejected():
    assert DEFAULT_POLICY.rejects(None)


def test_policy_thresholds_are_configurable():
    lenient = RejectionPolicy(min_length=1, max_tokens=0)
    assert not lenient.rejects("roaring loudly")


def test_policy_from_env(monkeypatch):
    monkeypatch.setenv("WILDWATCH_MIN_TRANSCRIPT_LENGTH", "20")
    monkeypatch.setenv("WILDWATCH_MAX_REJECT_TOKENS", "4")
    policy = RejectionPolicy.from_env()
    assert policy.min_length == 20
    assert policy.max_tokens == 4
    assert policy.fillers == DEFAULT_POLICY.fillers


def test_classifier_message_shape():
    system, user = build_messages("growling")
    assert system["role"] == "system"
    assert NORMAL_SENTENCE in system["content"]
    assert DISTRESS_SENTENCE in system["content"]
    assert user == {"role": "user", "content": "Animal vocalization transcription: growling"}


def test_classify_transcript_returns_model_answer(fake_openai):
    fake_openai.chat_reply = NORMAL_SENTENCE
    assert classify_transcript("the elephant is trumpeting calmly today", client=fake_openai) == NORMAL_SENTENCE
    assert len(fake_openai.chat_calls) == 1


def test_classify_transcript_propagates_errors(fake_openai):
    fake_openai.chat_error = RuntimeError("boom")
    with pytest.raises(RuntimeError):
        classify_transcript("the elephant is trumpeting calmly today", client=fake_openai)


def test_screen_raises_validation_reject():
    with pytest.raises(ValidationReject) as exc:
        DEFAULT_POLICY.screen("uh uh")
    assert exc.value.message == UNCLEAR_AUDIO_MESSAGE
    assert exc.value.details == "too_short"

    assert DEFAULT_POLICY.screen("the lion is roaring loudly and pacing") == "the lion is roaring loudly and pacing"


def test_numeric_noise_only_matches_ascii_digits():
    arabic_indic = "١٢٣ ٤٥٦ ٧٨٩ ٠١٢"
    assert DEFAULT_POLICY.reason(arabic_indic) is None
    assert DEFAULT_POLICY.reason("123 456 789 012") == "numeric_noise"


def test_empty_completion_uses_shared_fallback_text():
    empty = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=""))])
    assert first_message_text(empty) == NO_ANALYSIS
    assert first_message_text(SimpleNamespace(choices=[])) == NO_ANALYSIS
