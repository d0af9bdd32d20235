from flask import Blueprint, request, jsonify

from ..models.requests import (
    RoycoRewriteRequest, RoycoSuggestRequest, RoycoEnhanceRequest, RoycoSuggestionsRequest,
)
from ..services.royco.catalog import products_by_category
from ..services.royco.royco_enhancer import (
    replace_with_royco_products, suggest_royco_products, ensure_royco_products,
)
from ..services.royco.royco_suggestions import RoycoSuggestionService
from ..services.shared.service_config import ServiceConfig

royco_bp = Blueprint('royco', __name__, url_prefix="/royco")


@royco_bp.get("/products")
def list_products():
    try:
        products = products_by_category(request.args.get("category") or None)
    except ValueError as ve:
        return jsonify({"error": "unknown_category", "msg": str(ve)}), 400
    return jsonify({"products": [p.to_dict() for p in products]}), 200


@royco_bp.post("/rewrite")
def rewrite_text():
    body = RoycoRewriteRequest.model_validate(request.get_json(silent=True) or {})
    return jsonify({"text": replace_with_royco_products(body.text)}), 200


@royco_bp.post("/suggest")
def suggest_products():
    body = RoycoSuggestRequest.model_validate(request.get_json(silent=True) or {})
    return jsonify({"products": [p.to_dict() for p in suggest_royco_products(body.ingredients)]}), 200


@royco_bp.post("/enhance")
def enhance_recipe():
    body = RoycoEnhanceRequest.model_validate(request.get_json(silent=True) or {})
    return jsonify({"recipe": ensure_royco_products(body.recipe)}), 200


@royco_bp.post("/suggestions")
def usage_suggestions():
    """LLM-written usage notes; defaults when no provider answers"""
    body = RoycoSuggestionsRequest.model_validate(request.get_json(silent=True) or {})
    data = RoycoSuggestionService(ServiceConfig()).suggest(body.recipe_name, body.ingredients, body.cuisine)
    return jsonify(data), 200
