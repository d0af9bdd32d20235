# gemini_text.py
from typing import Dict

from ..shared.errors import ProviderError
from ..shared.retry import retry_with_backoff
from ..shared.service_config import ServiceConfig
from ..shared.gemini import make_client, generate, TRANSIENT_ERRORS
from ...utils.helpers import first_json_block


def complete_text(config: ServiceConfig, prompt: str, temperature: float = 0.7, max_tokens: int = 1024) -> str:
    client = make_client(config)
    text = retry_with_backoff(
        lambda: generate(client, config.gemini_model, prompt,
                         temperature=temperature, max_output_tokens=max_tokens),
        retries=config.max_retries,
        delay=config.retry_delay,
        retry_on=TRANSIENT_ERRORS,
    )
    if not (text or "").strip():
        raise ProviderError("gemini", "empty response")
    return text.strip()


def complete_json(config: ServiceConfig, prompt: str, temperature: float = 0.7, max_tokens: int = 4096) -> Dict:
    """Ask for a JSON object; ProviderError when the reply has none."""
    client = make_client(config)
    raw = retry_with_backoff(
        lambda: generate(client, config.gemini_model, prompt,
                         temperature=temperature, max_output_tokens=max_tokens, json_mode=True),
        retries=config.max_retries,
        delay=config.retry_delay,
        retry_on=TRANSIENT_ERRORS,
    )
    data = first_json_block(raw)
    if not data:
        raise ProviderError("gemini", "no JSON object in Gemini response", raw=raw or "")
    return data
