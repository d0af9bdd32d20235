from flask import Blueprint, jsonify

from ..services.shared.response_cache import ResponseCache
from ..services.shared.service_config import ServiceConfig

health_bp = Blueprint('health', __name__)


@health_bp.get("/health")
def health():
    """Health check endpoint"""
    return {"ok": True}, 200


@health_bp.get("/config")
def get_config():
    """Models, provider order and storage backend (no secrets)"""
    return jsonify(ServiceConfig().to_public_dict()), 200


@health_bp.post("/cache/clear")
def clear_cache():
    removed = ResponseCache.from_config(ServiceConfig()).clear()
    return jsonify({"cleared": removed}), 200
