from flask import Blueprint, request, jsonify

from ..services.detection.ingredient_detection_service import IngredientDetectionService
from ..services.detection.grocery_detection_service import GroceryDetectionService
from ..services.shared.service_config import ServiceConfig
from ..utils.helpers import images_from_request

detection_bp = Blueprint('detection', __name__, url_prefix="/detect")

MISSING_IMAGE_MSG = "form field 'image' or 'images[]' (or JSON 'image_base64') required"


def _bad_image(ve: ValueError):
    code = str(ve).split(":", 1)[0] or "bad_image"
    return jsonify({"error": code, "msg": str(ve)}), 400


@detection_bp.post("/ingredients")
def detect_ingredients():
    """Camera photo -> ranked ingredient list"""
    try:
        paths = images_from_request(request)
    except ValueError as ve:
        return _bad_image(ve)
    if not paths:
        return jsonify({"error": "missing_file", "msg": MISSING_IMAGE_MSG}), 400

    result = IngredientDetectionService(ServiceConfig()).detect(paths)
    payload = result.to_dict()
    if not result.success:
        payload["msg"] = payload.pop("error")
        payload["error"] = "no_ingredients"
        return jsonify(payload), 422
    return jsonify(payload), 200


@detection_bp.post("/groceries")
def detect_groceries():
    """Pantry scan; several images are analyzed one by one and merged"""
    try:
        paths = images_from_request(request)
    except ValueError as ve:
        return _bad_image(ve)
    if not paths:
        return jsonify({"error": "missing_file", "msg": MISSING_IMAGE_MSG}), 400

    service = GroceryDetectionService(ServiceConfig())
    result = service.detect_batch(paths) if len(paths) > 1 else service.detect(paths)
    payload = result.to_dict()
    if not result.success:
        return jsonify({"error": "no_groceries", "msg": result.message, **payload}), 422
    return jsonify(payload), 200
