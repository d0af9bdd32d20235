import time

from ..state.recipe_generation_state import RecipeGenerationState
from ..utils.timing import calculate_ms, print_node_summary
from ....services.royco.royco_enhancer import ensure_royco_products
from ....services.royco.royco_suggestions import RoycoSuggestionService


def apply_royco(state: RecipeGenerationState) -> RecipeGenerationState:
    """Brand the raw recipe and fetch Royco usage suggestions for it."""
    t0 = time.perf_counter()
    config = state["config"]
    raw = state["raw_recipe"] or {}

    if config.royco_enhancement:
        raw = ensure_royco_products(raw)
        state["raw_recipe"] = raw

    names = [i.get("name", "") for i in raw.get("ingredients") or []] or state["ingredients"]
    cuisine = state["preferences"].get("cuisine") or "Kenyan"
    state["royco_products"] = RoycoSuggestionService(config).suggest(raw.get("name") or "", names, cuisine)

    timing_ms = calculate_ms(t0)
    state["timings"]["royco_ms"] = timing_ms
    print_node_summary("royco", True, timing_ms,
                       sponsored=len(raw.get("sponsored_products") or []),
                       products=len(state["royco_products"].get("products") or []))
    return state
