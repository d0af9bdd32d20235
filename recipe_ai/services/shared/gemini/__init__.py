from .gemini_client import make_client, extract_text_from_response, prepare_image_parts, generate, TRANSIENT_ERRORS

__all__ = ["make_client", "extract_text_from_response", "prepare_image_parts", "generate", "TRANSIENT_ERRORS"]
