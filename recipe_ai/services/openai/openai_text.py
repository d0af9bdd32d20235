# openai_text.py
from typing import Dict

from ..shared.errors import ProviderError
from ..shared.retry import retry_with_backoff
from ..shared.service_config import ServiceConfig
from ..shared.openai import make_client, chat, TRANSIENT_ERRORS
from ...utils.helpers import first_json_block

RECIPE_SYSTEM = (
    "You are a professional Kenyan chef and Royco brand ambassador. "
    "Always respond with valid JSON."
)


def complete_text(config: ServiceConfig, prompt: str, temperature: float = 0.7, max_tokens: int = 1024) -> str:
    client = make_client(config)
    text = retry_with_backoff(
        lambda: chat(client, config.openai_model, prompt, temperature=temperature, max_tokens=max_tokens),
        retries=config.max_retries,
        delay=config.retry_delay,
        retry_on=TRANSIENT_ERRORS,
    )
    if not (text or "").strip():
        raise ProviderError("openai", "empty response")
    return text.strip()


def complete_json(config: ServiceConfig, prompt: str, temperature: float = 0.7, max_tokens: int = 2000) -> Dict:
    client = make_client(config)
    raw = retry_with_backoff(
        lambda: chat(client, config.openai_model, prompt, system=RECIPE_SYSTEM,
                     temperature=temperature, max_tokens=max_tokens, json_mode=True),
        retries=config.max_retries,
        delay=config.retry_delay,
        retry_on=TRANSIENT_ERRORS,
    )
    data = first_json_block(raw)
    if not data:
        raise ProviderError("openai", "no JSON object in OpenAI response", raw=raw or "")
    return data
