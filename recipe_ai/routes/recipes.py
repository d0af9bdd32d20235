import json
import uuid
import logging
from flask import Blueprint, request, jsonify, Response, stream_with_context

from ..models.requests import GenerateRecipeRequest, RecipePreferences, VariationsRequest
from ..services.recipes.recipe_service import RecipeService
from ..services.recipes.recipe_streamer import RecipeStreamer
from ..services.shared.errors import RecipeGenerationError
from ..services.shared.service_config import ServiceConfig
from ..utils.helpers import (
    images_from_request, save_job_manifest, load_job_request,
    update_job_partial, load_job_partial, sse_unpack,
)

logger = logging.getLogger(__name__)

recipes_bp = Blueprint('recipes', __name__, url_prefix="/recipes")

STREAM_PHASES = ("recipe", "royco", "image", "error", "done")


def _service() -> RecipeService:
    return RecipeService(ServiceConfig())


def _not_found(recipe_id: str):
    return jsonify({"error": "not_found", "msg": f"no saved recipe '{recipe_id}'"}), 404


@recipes_bp.post("/generate")
def generate():
    body = GenerateRecipeRequest.model_validate(request.get_json(silent=True) or {})
    try:
        recipe = _service().generate(body.ingredients, body.preferences.model_dump())
    except RecipeGenerationError as e:
        return jsonify({"error": "recipe_generation_failed", "msg": str(e)}), 500
    return jsonify({"success": True, "recipe": recipe}), 200


@recipes_bp.post("/from-image")
def generate_from_image():
    """Detect ingredients in the photo, then generate a recipe from them"""
    try:
        paths = images_from_request(request)
    except ValueError as ve:
        return jsonify({"error": str(ve).split(":", 1)[0], "msg": str(ve)}), 400
    if not paths:
        return jsonify({"error": "missing_file", "msg": "an image is required"}), 400

    raw_prefs = request.form.get("preferences")
    if raw_prefs:
        try:
            raw_prefs = json.loads(raw_prefs)
        except ValueError:
            return jsonify({"error": "bad_preferences", "msg": "preferences must be JSON"}), 400
    else:
        raw_prefs = (request.get_json(silent=True) or {}).get("preferences") or {}
    prefs = RecipePreferences.model_validate(raw_prefs)

    try:
        out = _service().generate_from_image(paths, prefs.model_dump())
    except RecipeGenerationError as e:
        return jsonify({"error": "recipe_generation_failed", "msg": str(e)}), 500
    if out["recipe"] is None:
        return jsonify({"error": "no_ingredients", "msg": out["detection"].get("error"),
                        "detection": out["detection"]}), 422
    return jsonify({"success": True, **out}), 200


@recipes_bp.post("/variations")
def variations():
    body = VariationsRequest.model_validate(request.get_json(silent=True) or {})
    results = _service().variations(body.ingredients, body.count)
    return jsonify({"variations": results}), 200


@recipes_bp.post("/jobs")
def create_job():
    """Store a generation request; the client then opens /recipes/generate_sse"""
    body = GenerateRecipeRequest.model_validate(request.get_json(silent=True) or {})
    job_id = uuid.uuid4().hex
    save_job_manifest(job_id, body.model_dump())
    return jsonify({"job_id": job_id}), 200


@recipes_bp.get("/generate_sse")
def generate_sse():
    """SSE stream for a stored generation job"""
    job_id = request.args.get("job_id", "")
    if not job_id:
        return jsonify({"error": "missing_job_id"}), 400

    job = load_job_request(job_id)
    if not job:
        return jsonify({"error": "invalid_job_id"}), 404

    service = _service()
    streamer = RecipeStreamer(service.config, service.store)

    def event_stream():
        for event in streamer.stream_generation(job["ingredients"], job.get("preferences") or {}):
            ev_name, ev_data = sse_unpack(event)
            if ev_name in STREAM_PHASES and isinstance(ev_data, dict):
                try:
                    update_job_partial(job_id, ev_name, ev_data)
                except OSError as e:
                    logger.warning("partial write failed for %s: %s", job_id, e)
            yield event

    headers = {
        "Content-Type": "text/event-stream",
        "Cache-Control": "no-cache, no-transform",
        "X-Accel-Buffering": "no",
        "Connection": "keep-alive",
    }
    return Response(stream_with_context(event_stream()), headers=headers)


@recipes_bp.get("/status")
def job_status():
    """Poll the merged partial state for a job (for clients where SSE is buffered)"""
    job_id = request.args.get("job_id", "")
    if not job_id:
        return jsonify({"error": "missing_job_id"}), 400
    data = load_job_partial(job_id)
    if data is None:
        return jsonify({"error": "not_found"}), 404
    return jsonify(data), 200


@recipes_bp.get("")
def list_recipes():
    limit = request.args.get("limit", default=20, type=int)
    return jsonify({"items": _service().list(limit)}), 200


@recipes_bp.get("/<recipe_id>")
def get_recipe(recipe_id):
    recipe = _service().get(recipe_id)
    if not recipe:
        return _not_found(recipe_id)
    return jsonify(recipe), 200


@recipes_bp.delete("/<recipe_id>")
def delete_recipe(recipe_id):
    if not _service().delete(recipe_id):
        return _not_found(recipe_id)
    return jsonify({"deleted": True, "id": recipe_id}), 200


@recipes_bp.get("/<recipe_id>/shopping-list")
def shopping_list(recipe_id):
    items = _service().shopping_list(recipe_id)
    if items is None:
        return _not_found(recipe_id)
    return jsonify({"recipe_id": recipe_id, "items": items}), 200


@recipes_bp.get("/<recipe_id>/cost")
def recipe_cost(recipe_id):
    estimate = _service().cost(recipe_id)
    if estimate is None:
        return _not_found(recipe_id)
    return jsonify({"recipe_id": recipe_id, "currency": "KES", "estimate": estimate}), 200
