import time
from typing import List, Dict, Any, Generator, Optional

from ..shared.errors import StoreError
from ..shared.recipe_store import RecipeStore
from ..shared.service_config import ServiceConfig
from ...graphs.recipe_generation import initial_state
from ...graphs.recipe_generation.nodes import generate_recipe, apply_royco, illustrate_recipe, format_recipe
from ...graphs.recipe_generation.utils.timing import print_pipeline_summary
from ...utils.helpers import sse_pack, call_with_heartbeat


class RecipeStreamer:
    """Runs the recipe pipeline node by node and emits an SSE event per phase"""

    def __init__(self, config: ServiceConfig, store: RecipeStore):
        self.config = config
        self.store = store

    def stream_generation(self, ingredients: List[str],
                          preferences: Optional[Dict[str, Any]] = None) -> Generator[str, None, None]:
        state = initial_state(self.config, ingredients, preferences)
        timings = state["timings"]
        t_total = time.perf_counter()

        # -------- recipe --------
        try:
            state = yield from call_with_heartbeat(lambda: generate_recipe(state))
        except Exception as e:
            yield sse_pack("error", {"stage": "recipe", "msg": str(e)})
            yield sse_pack("done", {"error": "generation_failed"})
            return
        raw = state["raw_recipe"]
        yield sse_pack("recipe", {
            "name": raw.get("name"),
            "description": raw.get("description"),
            "ingredients": raw.get("ingredients"),
            "source": state["source"],
            "timings": timings,
        })

        # -------- royco --------
        try:
            state = yield from call_with_heartbeat(lambda: apply_royco(state))
        except Exception as e:
            yield sse_pack("error", {"stage": "royco", "msg": str(e)})
            yield sse_pack("done", {"error": "royco_failed"})
            return
        yield sse_pack("royco", {
            "royco_products": state["royco_products"],
            "sponsored_products": (state["raw_recipe"] or {}).get("sponsored_products") or [],
            "timings": timings,
        })

        # -------- image --------
        try:
            state = yield from call_with_heartbeat(lambda: illustrate_recipe(state))
        except Exception as e:
            yield sse_pack("error", {"stage": "image", "msg": str(e)})
            yield sse_pack("done", {"error": "image_failed"})
            return
        yield sse_pack("image", {"image": state["image"], "image_prompt": state["image_prompt"], "timings": timings})

        # -------- format --------
        state = format_recipe(state)
        state["total_ms"] = round((time.perf_counter() - t_total) * 1000.0, 2)
        print_pipeline_summary(state)
        if state.get("error"):
            yield sse_pack("error", {"stage": "format", "msg": state["error"]})
            yield sse_pack("done", {"error": "validation_failed"})
            return

        recipe = state["recipe"]
        try:
            self.store.save(recipe)
        except StoreError as e:
            yield sse_pack("error", {"stage": "save", "msg": str(e)})
            yield sse_pack("done", {"error": "store_failed"})
            return
        yield sse_pack("done", {"recipe": recipe, "timings": timings, "total_ms": state["total_ms"]})
