from .recipe_generation_graph import build_recipe_generation_graph, run_recipe_generation, initial_state
from .state.recipe_generation_state import RecipeGenerationState

__all__ = ["build_recipe_generation_graph", "run_recipe_generation", "initial_state", "RecipeGenerationState"]
