# recipe_ai/models/requests.py
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Literal, Dict, Any


def _clean_names(v: List[str]) -> List[str]:
    out = [s.strip() for s in v if isinstance(s, str) and s.strip()]
    if not out:
        raise ValueError("at least one ingredient is required")
    return out


class RecipePreferences(BaseModel):
    cuisine: Optional[str] = None
    dietary_restrictions: List[str] = []
    servings: Optional[int] = Field(default=None, ge=1, le=50)
    difficulty: Optional[Literal["easy", "medium", "hard"]] = None


class GenerateRecipeRequest(BaseModel):
    ingredients: List[str] = Field(..., min_length=1)
    preferences: RecipePreferences = RecipePreferences()

    @field_validator("ingredients")
    @classmethod
    def clean_ingredients(cls, v: List[str]) -> List[str]:
        return _clean_names(v)


class VariationsRequest(BaseModel):
    ingredients: List[str] = Field(..., min_length=1)
    count: int = Field(default=3, ge=1, le=8)

    @field_validator("ingredients")
    @classmethod
    def clean_ingredients(cls, v: List[str]) -> List[str]:
        return _clean_names(v)


class RoycoSuggestionsRequest(BaseModel):
    recipe_name: str = Field(..., min_length=1)
    ingredients: List[str] = []
    cuisine: str = "Kenyan"


class RoycoRewriteRequest(BaseModel):
    text: str


class RoycoSuggestRequest(BaseModel):
    ingredients: List[str] = []


class RoycoEnhanceRequest(BaseModel):
    recipe: Dict[str, Any]
