from .openai_client import make_client, extract_text_from_response, prepare_image_parts, chat, TRANSIENT_ERRORS

__all__ = ["make_client", "extract_text_from_response", "prepare_image_parts", "chat", "TRANSIENT_ERRORS"]
