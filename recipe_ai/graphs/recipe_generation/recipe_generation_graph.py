import time
from typing import Dict, Any, List, Optional

from langgraph.graph import StateGraph, END

from .state.recipe_generation_state import RecipeGenerationState
from .nodes import generate_recipe, apply_royco, illustrate_recipe, format_recipe
from .utils.timing import print_pipeline_summary
from ...services.shared.errors import RecipeGenerationError
from ...services.shared.service_config import ServiceConfig


def build_recipe_generation_graph():
    """
    Build the recipe generation graph:
    1. generate   - provider chain (or template fallback) -> raw recipe
    2. royco      - Royco branding and usage suggestions
    3. illustrate - food-photography prompt and hero image URL
    4. format     - app-facing recipe, validated

    Returns:
        Compiled LangGraph workflow
    """
    workflow = StateGraph(RecipeGenerationState)

    workflow.add_node("generate", generate_recipe)
    workflow.add_node("royco", apply_royco)
    workflow.add_node("illustrate", illustrate_recipe)
    workflow.add_node("format", format_recipe)

    workflow.set_entry_point("generate")
    workflow.add_edge("generate", "royco")
    workflow.add_edge("royco", "illustrate")
    workflow.add_edge("illustrate", "format")
    workflow.add_edge("format", END)

    return workflow.compile()


def initial_state(config: ServiceConfig, ingredients: List[str],
                  preferences: Optional[Dict[str, Any]] = None) -> RecipeGenerationState:
    return {
        "ingredients": list(ingredients),
        "preferences": dict(preferences or {}),
        "config": config,
        "raw_recipe": None,
        "source": None,
        "provider_errors": [],
        "royco_products": None,
        "image": None,
        "image_prompt": None,
        "recipe": None,
        "timings": {},
        "total_ms": None,
        "error": None,
    }


def run_recipe_generation(config: ServiceConfig, ingredients: List[str],
                          preferences: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run the recipe generation workflow.

    Returns:
        The formatted recipe

    Raises:
        RecipeGenerationError: If the workflow ends without a valid recipe
    """
    t0 = time.perf_counter()

    graph = build_recipe_generation_graph()
    final_state = graph.invoke(initial_state(config, ingredients, preferences))

    final_state["total_ms"] = round((time.perf_counter() - t0) * 1000.0, 2)
    print_pipeline_summary(final_state)

    if final_state.get("error") or not final_state.get("recipe"):
        raise RecipeGenerationError(final_state.get("error") or "no recipe produced")
    return final_state["recipe"]
