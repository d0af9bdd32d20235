import time
from pydantic import ValidationError

from ..state.recipe_generation_state import RecipeGenerationState
from ..utils.timing import calculate_ms, print_node_summary
from ....models.recipe import RecipeOut
from ....services.recipes.recipe_formatter import RecipeFormatter


def format_recipe(state: RecipeGenerationState) -> RecipeGenerationState:
    """
    Build the app-facing recipe and validate it with the RecipeOut model.
    A recipe without an http image does not pass.
    """
    t0 = time.perf_counter()

    recipe = RecipeFormatter.format_recipe(
        state["raw_recipe"] or {},
        state["ingredients"],
        state["preferences"],
        image=state.get("image") or "",
        royco_products=state.get("royco_products") or {},
        source=state.get("source") or "fallback",
    )
    try:
        RecipeOut(**recipe)
        state["recipe"] = recipe
        timing_ms = calculate_ms(t0)
        print_node_summary("format", True, timing_ms, id=recipe["id"])
    except ValidationError as e:
        state["error"] = f"recipe_validation_failed: {e}"
        timing_ms = calculate_ms(t0)
        print_node_summary("format", False, timing_ms, error=str(e).splitlines()[0])

    state["timings"]["format_ms"] = timing_ms
    return state
