import time

from ..state.recipe_generation_state import RecipeGenerationState
from ..utils.timing import calculate_ms, print_node_summary
from ....services.recipes.recipe_images import RecipeIllustrator


def illustrate_recipe(state: RecipeGenerationState) -> RecipeGenerationState:
    t0 = time.perf_counter()
    raw = state["raw_recipe"] or {}
    names = [i.get("name", "") for i in raw.get("ingredients") or []] or state["ingredients"]

    image, image_prompt = RecipeIllustrator(state["config"]).illustrate(
        raw.get("name") or "Delicious Recipe",
        names,
        state["preferences"].get("cuisine") or "Kenyan",
        raw.get("description") or "",
    )
    state["image"] = image
    state["image_prompt"] = image_prompt

    timing_ms = calculate_ms(t0)
    state["timings"]["illustrate_ms"] = timing_ms
    print_node_summary("illustrate", True, timing_ms, prompt=bool(image_prompt))
    return state
