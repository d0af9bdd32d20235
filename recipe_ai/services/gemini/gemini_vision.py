# gemini_vision.py
"""
Gemini Vision tasks: camera ingredient detection and pantry grocery scans.
"""

from typing import Dict, List

from ..shared.errors import ProviderError
from ..shared.retry import retry_with_backoff
from ..shared.service_config import ServiceConfig
from ..shared.gemini import make_client, prepare_image_parts, generate, TRANSIENT_ERRORS
from ...prompts.detection_prompt import build_ingredient_detection_prompt, build_grocery_detection_prompt
from ...utils.helpers import first_json_array


def _ask_for_list(config: ServiceConfig, prompt: str, image_paths: List[str], keys) -> List:
    client = make_client(config)
    parts = prepare_image_parts(image_paths)
    if not parts:
        raise ProviderError("gemini", "no readable images")

    raw = retry_with_backoff(
        lambda: generate(client, config.gemini_model, prompt, image_parts=parts,
                         temperature=0.2, max_output_tokens=1000, json_mode=True),
        retries=config.max_retries,
        delay=config.retry_delay,
        retry_on=TRANSIENT_ERRORS,
    )
    data = first_json_array(raw, keys=keys)
    if data is None:
        raise ProviderError("gemini", "no JSON array in Gemini response", raw=raw or "")
    return data


def detect_ingredients(config: ServiceConfig, image_paths: List[str]) -> List[Dict]:
    """
    Returns [{name, confidence}] as reported by the model (unnormalized).
    """
    return _ask_for_list(config, build_ingredient_detection_prompt(), image_paths, keys=("ingredients", "items"))


def detect_groceries(config: ServiceConfig, image_paths: List[str]) -> List[Dict]:
    return _ask_for_list(config, build_grocery_detection_prompt(), image_paths, keys=("items", "groceries"))
