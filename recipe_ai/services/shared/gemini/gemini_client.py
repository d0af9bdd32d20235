# gemini_client.py
import os
import base64
from typing import List

from google import genai
from google.genai import errors, types

from ..errors import ProviderUnavailable
from ..service_config import ServiceConfig
from ....utils.helpers import mime_for_path

# 5xx only; 4xx (bad key, bad request) fail straight away
TRANSIENT_ERRORS = (errors.ServerError,)


def make_client(config: ServiceConfig) -> genai.Client:
    # Prioritize API key authentication; avoids the Application Default Credentials error in containers
    if config.google_api_key:
        return genai.Client(api_key=config.google_api_key)

    # Fallback to Vertex AI if no API key is available
    if config.project:
        try:
            return genai.Client(vertexai=True, project=config.project, location=config.location)
        except Exception as e:
            raise ProviderUnavailable("gemini", f"failed to initialize Vertex AI client: {e}")

    raise ProviderUnavailable("gemini", "provide GOOGLE_API_KEY or GOOGLE_CLOUD_PROJECT")


def encode_image_to_part(path: str) -> types.Part:
    with open(path, "rb") as f:
        data = f.read()
    return types.Part.from_bytes(data=data, mime_type=mime_for_path(path))


def prepare_image_parts(paths: List[str]) -> List[types.Part]:
    return [encode_image_to_part(p) for p in paths if os.path.exists(p)]


def extract_text_from_response(resp) -> str:
    """Return JSON/text from parts; also decode inline_data if needed."""
    try:
        for cand in (getattr(resp, "candidates", []) or []):
            content = getattr(cand, "content", None)
            if not content:
                continue
            for part in (getattr(content, "parts", []) or []):
                t = getattr(part, "text", None)
                if isinstance(t, str) and t.strip():
                    return t
                inline = getattr(part, "inline_data", None)
                if inline:
                    data = getattr(inline, "data", None)
                    if isinstance(data, (bytes, bytearray)):
                        return data.decode("utf-8", "ignore")
                    if isinstance(data, str):
                        try:
                            return base64.b64decode(data).decode("utf-8", "ignore")
                        except Exception:
                            return data
        top = getattr(resp, "text", None)
        return top if isinstance(top, str) else ""
    except Exception:
        return ""


def generate(client: genai.Client, model: str, prompt: str, image_parts=None,
             temperature: float = 0.3, max_output_tokens: int = 2048, json_mode: bool = False) -> str:
    """Single generate_content call -> reply text."""
    cfg = types.GenerateContentConfig(
        temperature=temperature,
        max_output_tokens=max_output_tokens,
        **({"response_mime_type": "application/json"} if json_mode else {}),
    )
    parts = [types.Part.from_text(text=prompt)] + list(image_parts or [])
    resp = client.models.generate_content(
        model=model,
        contents=[types.Content(role="user", parts=parts)],
        config=cfg,
    )
    return extract_text_from_response(resp) or getattr(resp, "text", "") or ""
