# openai_client.py
import os
import base64
from typing import Dict, List, Optional

import openai
from openai import OpenAI

from ..errors import ProviderUnavailable
from ..service_config import ServiceConfig
from ....utils.helpers import mime_for_path

# worth retrying; auth and bad-request errors are not
TRANSIENT_ERRORS = (openai.APIConnectionError, openai.RateLimitError, openai.InternalServerError)


def make_client(config: ServiceConfig) -> OpenAI:
    """
    Create OpenAI client from the configured API key.
    """
    if not config.openai_api_key:
        raise ProviderUnavailable("openai", "OPENAI_API_KEY is not configured")
    return OpenAI(api_key=config.openai_api_key)


def prepare_image_parts(image_paths: List[str], detail: str = "high") -> List[Dict]:
    """
    Prepare image parts for OpenAI API from file paths.
    """
    image_parts = []
    for image_path in image_paths:
        if not os.path.exists(image_path):
            continue

        with open(image_path, "rb") as image_file:
            base64_image = base64.b64encode(image_file.read()).decode('utf-8')

        image_parts.append({
            "type": "image_url",
            "image_url": {
                "url": f"data:{mime_for_path(image_path)};base64,{base64_image}",
                "detail": detail,
            }
        })

    return image_parts


def extract_text_from_response(response) -> str:
    """
    Extract text from OpenAI response.
    """
    if hasattr(response, 'choices') and response.choices:
        return response.choices[0].message.content or ""
    return ""


def chat(client: OpenAI, model: str, user_content, system: Optional[str] = None,
         temperature: float = 0.3, max_tokens: int = 1000, json_mode: bool = False) -> str:
    """Single chat.completions call -> reply text."""
    messages = []
    if system:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": user_content})
    kwargs = {"response_format": {"type": "json_object"}} if json_mode else {}
    resp = client.chat.completions.create(
        model=model,
        messages=messages,
        temperature=temperature,
        max_tokens=max_tokens,
        **kwargs,
    )
    return extract_text_from_response(resp)
