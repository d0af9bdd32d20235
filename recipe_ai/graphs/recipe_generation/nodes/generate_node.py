import time
import logging

from ..state.recipe_generation_state import RecipeGenerationState
from ..utils.timing import calculate_ms, print_node_summary
from ....prompts.recipe_prompt import build_recipe_prompt
from ....services.recipes.recipe_fallback import create_fallback_recipe
from ....services.recipes.recipe_formatter import coerce_raw_recipe
from ....services.recipes.recipe_generator_factory import RecipeGeneratorFactory
from ....services.royco.royco_enhancer import generate_royco_enhanced_prompt

logger = logging.getLogger(__name__)


def generate_recipe(state: RecipeGenerationState) -> RecipeGenerationState:
    """
    Ask each configured text provider in turn for a recipe; the first reply
    that coerces into a named recipe with ingredients wins. Falls back to a
    template recipe when every provider is missing or fails.
    """
    t0 = time.perf_counter()
    config = state["config"]
    prompt = generate_royco_enhanced_prompt(build_recipe_prompt(state["ingredients"], state["preferences"]))

    for provider in RecipeGeneratorFactory.available(config):
        try:
            raw = coerce_raw_recipe(provider.generate_recipe(config, prompt))
            if not raw["name"] or not raw["ingredients"]:
                raise ValueError("recipe reply is missing a name or ingredients")
            state["raw_recipe"] = raw
            state["source"] = provider.name
            break
        except Exception as e:
            logger.warning("recipe generation via %s failed: %s", provider.name, e)
            state["provider_errors"].append(f"{provider.name}: {e}")

    if not state.get("raw_recipe"):
        state["raw_recipe"] = coerce_raw_recipe(create_fallback_recipe(state["ingredients"], state["preferences"]))
        state["source"] = "fallback"

    timing_ms = calculate_ms(t0)
    state["timings"]["generate_ms"] = timing_ms
    print_node_summary("generate", True, timing_ms, source=state["source"])
    return state
