# openai_vision.py
"""
OpenAI GPT-4o vision tasks: camera ingredient detection and pantry grocery scans.
json_object mode requires an object reply, so list results come wrapped
under "ingredients" / "items".
"""

from typing import Dict, List

from ..shared.errors import ProviderError
from ..shared.retry import retry_with_backoff
from ..shared.service_config import ServiceConfig
from ..shared.openai import make_client, prepare_image_parts, chat, TRANSIENT_ERRORS
from ...prompts.detection_prompt import (
    build_ingredient_detection_prompt,
    GROCERY_DETECTION_SYSTEM,
    GROCERY_DETECTION_USER,
)
from ...utils.helpers import first_json_array


def _ask_for_list(config: ServiceConfig, system, user_text: str, image_paths: List[str], keys) -> List:
    client = make_client(config)
    img_parts = prepare_image_parts(image_paths)
    if not img_parts:
        raise ProviderError("openai", "no readable images")
    content_parts = [{"type": "text", "text": user_text}] + img_parts

    raw = retry_with_backoff(
        lambda: chat(client, config.openai_model, content_parts, system=system,
                     temperature=0.3, max_tokens=1000, json_mode=True),
        retries=config.max_retries,
        delay=config.retry_delay,
        retry_on=TRANSIENT_ERRORS,
    )
    data = first_json_array(raw, keys=keys)
    if data is None:
        raise ProviderError("openai", "no JSON array in OpenAI response", raw=raw or "")
    return data


def detect_ingredients(config: ServiceConfig, image_paths: List[str]) -> List[Dict]:
    return _ask_for_list(config, None, build_ingredient_detection_prompt(), image_paths,
                         keys=("ingredients", "items"))


def detect_groceries(config: ServiceConfig, image_paths: List[str]) -> List[Dict]:
    return _ask_for_list(config, GROCERY_DETECTION_SYSTEM.strip(), GROCERY_DETECTION_USER, image_paths,
                         keys=("items", "groceries"))
