# recipe_ai/models/recipe.py
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Dict, Any


class IngredientRow(BaseModel):
    id: str
    name: str
    amount: str
    quantity: float
    unit: str
    category: str = "Main"
    group: str = "Ingredients"
    note: Optional[str] = None
    is_royco_product: bool = False


class StepRow(BaseModel):
    id: str
    title: str
    body: str
    time: float


class RoycoProductUse(BaseModel):
    name: str
    usage: str = ""
    benefit: str = ""
    amount: str = ""


class RoycoSuggestion(BaseModel):
    products: List[RoycoProductUse] = []
    preparation_tips: List[str] = []
    flavor_profile: str = ""
    serving_suggestion: str = ""


class RecipeOut(BaseModel):
    """App-facing recipe; checked before it is saved or returned"""
    id: str = Field(..., pattern=r"^ai_")
    title: str = Field(..., min_length=1)
    summary: str
    description: str
    image: str
    cuisine: str
    servings: int = Field(..., ge=1)
    difficulty: str
    ingredients: List[IngredientRow]
    steps: List[StepRow]
    nutrition: Dict[str, Any]
    royco_products: RoycoSuggestion
    source: str

    @field_validator("image")
    @classmethod
    def image_must_be_http(cls, v: str) -> str:
        if not v.startswith("http"):
            raise ValueError("recipe image must be an http(s) URL")
        return v
