from __future__ import annotations

IMAGE_PROMPT = (
    "You are a wildlife expert specializing in animal behavior and health. "
    "Analyze the animal shown and first say either The animal is in distress! "
    "OR say The animal is not in distress Then describe why their behavior or "
    "condition appears normal or abnormal. Explain your reasoning very briefly "
    "and in plain language."
)

NORMAL_SENTENCE = "This behavior is normal, no distress recognized."
DISTRESS_SENTENCE = "This behavior is abnormal, the animal is in distress!"
CANONICAL_SENTENCES = (NORMAL_SENTENCE, DISTRESS_SENTENCE)

AUDIO_SYSTEM_PROMPT = (
    "You are a wildlife expert. Respond with only one of the following: "
    f"{NORMAL_SENTENCE} OR {DISTRESS_SENTENCE}"
)

UNCLEAR_AUDIO_MESSAGE = (
    "The audio was too short, unclear, or not recognized as an animal sound. "
    "Please upload a different recording."
)

NO_ANALYSIS = "No analysis returned."


def transcript_message(transcript: str) -> str:
    return f"Animal vocalization transcription: {transcript}"
