from typing import Dict, Any, List, Optional, TypedDict

from ....services.shared.service_config import ServiceConfig


class RecipeGenerationState(TypedDict):
    """State for the recipe generation workflow"""

    # Input data
    ingredients: List[str]
    preferences: Dict[str, Any]
    config: ServiceConfig

    # Generation results
    raw_recipe: Optional[Dict[str, Any]]
    source: Optional[str]
    provider_errors: List[str]

    # Royco overlay
    royco_products: Optional[Dict[str, Any]]

    # Illustration
    image: Optional[str]
    image_prompt: Optional[str]

    # Final app-facing recipe
    recipe: Optional[Dict[str, Any]]

    # Performance tracking
    timings: Dict[str, float]
    total_ms: Optional[float]

    error: Optional[str]
