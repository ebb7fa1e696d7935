"""
Vision (Image → distress assessment)

Sends the uploaded photo as a base64 data URL together with the fixed
wildlife prompt to the chat completion model.
"""

from __future__ import annotations

import base64
from typing import Any, Dict, List, Optional

from wildwatch import config
from wildwatch.screening.prompts import IMAGE_PROMPT
from wildwatch.services.openai_client import first_message_text, get_client


def image_data_url(image_bytes: bytes) -> str:
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:image/jpeg;base64,{encoded}"


def build_messages(image_bytes: bytes) -> List[Dict[str, Any]]:
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": IMAGE_PROMPT},
                {"type": "image_url", "image_url": {"url": image_data_url(image_bytes)}},
            ],
        }
    ]


def analyze_image(image_bytes: bytes, client: Optional[Any] = None) -> str:
    """
    Ask the vision model to assess the animal in the image.

    Args:
        image_bytes (bytes): Raw image bytes, sent as JPEG.
        client: OpenAI client; the shared lazy client when omitted.

    Returns:
        str: The model's text, or "No analysis returned." if it was empty.
    """
    client = client or get_client()
    response = client.chat.completions.create(
        model=config.VISION_MODEL,
        messages=build_messages(image_bytes),
        max_tokens=config.MAX_TOKENS,
    )
    return first_message_text(response)
