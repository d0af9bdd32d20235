import json

import pytest
from conftest import FakeGenerator

from recipe_ai.graphs.recipe_generation import run_recipe_generation
from recipe_ai.services.recipes.recipe_fallback import FALLBACK_NUTRITION, create_fallback_recipe
from recipe_ai.services.recipes.recipe_formatter import RecipeFormatter, coerce_raw_recipe
from recipe_ai.services.recipes.recipe_images import (
    CUISINE_IMAGES,
    DEFAULT_CUISINE_IMAGE,
    UNSPLASH,
    RecipeIllustrator,
    default_recipe_image,
    fallback_image,
    image_url_from_prompt,
    suggest_camera_angle,
)
from recipe_ai.services.recipes.recipe_planning import (
    estimate_recipe_cost,
    generate_recipe_variations,
    generate_shopping_list,
    variation_preferences,
)
from recipe_ai.services.recipes.recipe_service import RecipeService
from recipe_ai.services.royco.royco_suggestions import DEFAULT_ROYCO_SUGGESTION
from recipe_ai.services.shared.errors import ProviderError
from recipe_ai.services.shared.recipe_store import LocalRecipeStore


PILAU_REPLY = {
    "name": "Beef Pilau",
    "swahiliName": "Pilau ya Nyama",
    "description": "Fragrant rice with tender beef.",
    "prepTime": "10 min",
    "cookTime": 45,
    "ingredients": [
        {"name": "beef", "quantity": "500", "unit": "g"},
        {"name": "pilau masala", "quantity": "2", "unit": "tbsp"},
        "rice",
    ],
    "steps": ["Brown the beef", {"title": "Spice", "body": "Add curry powder and rice", "time": 30}],
}

SUGGESTION_REPLY = json.dumps({
    "products": [{"name": "Royco Pilau Masala", "usage": "Stir in with the rice", "amount": "2 tbsp"}],
    "preparationTips": ["Toast the spices first"],
    "flavorProfile": "Warm and aromatic",
})


# ---------- raw reply coercion ----------

def test_coerce_raw_recipe_accepts_provider_variants():
    raw = coerce_raw_recipe({"recipe": {
        "title": {"english": "Beef Stew", "swahili": "Mchuzi wa Nyama"},
        "ingredients": ["salt", {"item": "beef", "amount": "500", "unit": "g"}, {"name": ""}],
        "instructions": [{"description": "Boil", "time": "5 min"}, "  ", "Serve"],
        "prep_time": "10 minutes",
        "cookTime": 0,
        "serves": "6",
        "difficulty": "Easy",
        "tips": "Taste first",
    }})

    assert raw["name"] == "Beef Stew"
    assert raw["swahili_name"] == "Mchuzi wa Nyama"
    assert raw["ingredients"] == [{"name": "salt"}, {"name": "beef", "quantity": "500", "unit": "g"}]
    assert raw["steps"] == [{"body": "Boil", "time": 5.0}, "Serve"]
    assert (raw["prep_time"], raw["cook_time"]) == (10, 30)
    assert raw["servings"] == 6
    assert raw["difficulty"] == "easy"
    assert raw["chef_tips"] == ["Taste first"]


def test_format_recipe_fills_defaults():
    raw = coerce_raw_recipe({"name": "Ugali", "ingredients": ["maize flour", "water"],
                             "steps": ["Boil water", "Stir in flour", "Serve"]})
    recipe = RecipeFormatter.format_recipe(raw, ["maize flour", "water"], {"cuisine": "Kenyan"},
                                           image="https://example.com/u.jpg", royco_products={},
                                           source="gemini", recipe_id="ai_test")

    assert recipe["id"] == "ai_test"
    assert recipe["title"] == "Ugali"
    assert recipe["time"] == "45 min"
    assert recipe["servings"] == 4
    assert recipe["difficulty"] == "medium"
    assert recipe["calories"] == 450
    assert recipe["images"] == ["https://example.com/u.jpg"]
    assert [s["time"] for s in recipe["steps"]] == [10, 10, 10]
    assert recipe["steps"][0]["title"] == "Step 1"
    assert recipe["ingredients"][0] == {
        "id": "ai_test-ing-1", "name": "maize flour", "item": "maize flour", "amount": "1",
        "quantity": 1.0, "unit": "cup", "category": "Main", "group": "Ingredients",
        "note": None, "is_royco_product": False,
    }
    assert recipe["is_ai_generated"] and recipe["created_by"] == "ai"
    assert recipe["generated_at"].endswith("Z")


# ---------- fallback templates ----------

def test_kenyan_fallback_template():
    recipe = create_fallback_recipe(["beef", "onion"], {"cuisine": "Kenyan", "servings": 6})
    assert recipe["name"] == "Kenyan Stew with beef"
    assert (recipe["prep_time"], recipe["cook_time"]) == (20, 40)
    assert len(recipe["steps"]) == 7
    assert "Add beef, onion" in recipe["steps"]
    assert recipe["servings"] == 6
    assert recipe["nutrition"] == FALLBACK_NUTRITION


def test_default_fallback_template():
    recipe = create_fallback_recipe(["kale", "garlic", "oil"])
    assert recipe["name"] == "Recipe with kale and garlic"
    assert (recipe["prep_time"], recipe["cook_time"], recipe["servings"]) == (15, 30, 4)
    assert recipe["ingredients"][2] == {"name": "oil", "quantity": "1", "unit": "cup"}


# ---------- images ----------

def test_image_helpers():
    assert default_recipe_image("Kenyan") == CUISINE_IMAGES["kenyan"]
    assert default_recipe_image("Peruvian") == DEFAULT_CUISINE_IMAGE
    assert suggest_camera_angle("Beef Stew", ["beef"]) == "45-degree angle to show depth and texture"
    assert suggest_camera_angle("Toast", ["bread"]) == "overhead shot for complete presentation"
    url = image_url_from_prompt("Beef Pilau", "A hot plate of rice, fresh herbs in a bowl")
    assert url == f"{UNSPLASH}/1200x800/?food,beef%20pilau,hot,plate,fresh"



def test_failed_image_prompt_falls_back_to_recipe_search(make_config, patch_generators):
    patch_generators(FakeGenerator("gemini", image_prompt=ProviderError("gemini", "down")))
    illustrator = RecipeIllustrator(make_config())

    image, prompt = illustrator.illustrate("Beef Pilau!", ["Beef", "rice"], "Swahili")

    assert prompt == ""
    assert image == fallback_image("Beef Pilau!", ["Beef", "rice"], "Swahili")
    assert image == f"{UNSPLASH}/800x600/?beef%2Cbeef%20pilau%2Cswahili%2Cfood%2Ccooking"

    patch_generators()
    assert RecipeIllustrator(make_config()).illustrate("Beef Pilau", ["beef"], "Swahili") == (CUISINE_IMAGES["swahili"], "")


# ---------- pipeline ----------

def test_pipeline_without_providers_uses_templates(make_config, patch_generators):
    patch_generators()
    recipe = run_recipe_generation(make_config(), ["beef", "onion"], {"cuisine": "Kenyan"})

    assert recipe["source"] == "fallback"
    assert recipe["title"] == "Kenyan Stew with beef"
    assert recipe["image"] == CUISINE_IMAGES["kenyan"]
    assert recipe["royco_products"] == DEFAULT_ROYCO_SUGGESTION
    assert recipe["royco_enhanced"] is True
    assert recipe["id"].startswith("ai_")


def test_pipeline_with_provider_brands_and_illustrates(make_config, patch_generators):
    gen = FakeGenerator("gemini", recipe=PILAU_REPLY, suggestion=SUGGESTION_REPLY)
    patch_generators(gen)
    recipe = run_recipe_generation(make_config(), ["beef", "rice"], {"cuisine": "Swahili"})

    assert recipe["source"] == "gemini"
    assert recipe["title"] == "Beef Pilau"
    assert recipe["swahili_name"] == "Pilau ya Nyama"
    assert recipe["time"] == "55 min"

    masala = recipe["ingredients"][1]
    assert masala["name"] == "Royco Pilau Masala"
    assert masala["is_royco_product"] is True
    assert masala["note"] == "for authentic East African flavor"
    assert recipe["steps"][1]["body"] == "Add Royco Mchuzi Mix and rice"
    assert recipe["steps"][1]["time"] == 30
    assert "Royco Pilau Masala" in recipe["sponsored_products"]

    assert recipe["royco_products"]["products"][0]["name"] == "Royco Pilau Masala"
    assert recipe["royco_products"]["preparation_tips"] == ["Toast the spices first"]
    assert recipe["image"] == f"{UNSPLASH}/1200x800/?food,beef%20pilau,bowl,fresh,homemade"

    assert "beef, rice" in gen.prompts[0]
    assert "Royco" in gen.prompts[0]


def test_pipeline_moves_past_unusable_replies(make_config, patch_generators):
    broken = FakeGenerator("gemini", error=ProviderError("gemini", "quota"))
    nameless = FakeGenerator("openai", recipe={"ingredients": ["rice"]})
    patch_generators(broken, nameless)
    recipe = run_recipe_generation(make_config(), ["rice"], {})

    assert recipe["source"] == "fallback"
    assert recipe["title"] == "Recipe with rice"
    # first provider still writes the image prompt; suggestions fall back
    assert recipe["image"].startswith(f"{UNSPLASH}/1200x800/")
    assert recipe["royco_products"] == DEFAULT_ROYCO_SUGGESTION


def test_royco_enhancement_can_be_switched_off(make_config, patch_generators):
    patch_generators(FakeGenerator("gemini", recipe=PILAU_REPLY, suggestion=SUGGESTION_REPLY))
    recipe = run_recipe_generation(make_config(ROYCO_ENHANCEMENT=False), ["beef"], {})

    assert recipe["ingredients"][1]["name"] == "pilau masala"
    assert recipe["royco_enhanced"] is False
    assert recipe["sponsored_products"] == []


# ---------- service ----------

def test_service_saves_and_caches(make_config, patch_generators, tmp_path):
    gen = FakeGenerator("gemini", recipe=PILAU_REPLY, suggestion=SUGGESTION_REPLY)
    patch_generators(gen)
    cfg = make_config(CACHE_ENABLED=True)
    store = LocalRecipeStore(str(tmp_path / "store"))
    service = RecipeService(cfg, store=store)

    first = service.generate(["beef", "rice"], {"cuisine": "", "servings": None})
    calls = len(gen.prompts)
    second = service.generate(["beef", "rice"])

    assert second == first
    assert len(gen.prompts) == calls
    assert service.get(first["id"]) == first
    assert [r["id"] for r in service.list()] == [first["id"]]
    assert service.cost(first["id"]) == 4 * 150 + 50
    assert "500 g beef" in service.shopping_list(first["id"])
    assert service.delete(first["id"]) is True
    assert service.get(first["id"]) is None
    assert service.shopping_list(first["id"]) is None


def test_cached_recipe_is_saved_again_after_delete(make_config, patch_generators, tmp_path):
    patch_generators(FakeGenerator("gemini", recipe=PILAU_REPLY, suggestion=SUGGESTION_REPLY))
    service = RecipeService(make_config(CACHE_ENABLED=True), store=LocalRecipeStore(str(tmp_path / "store")))

    first = service.generate(["beef", "rice"])
    assert service.delete(first["id"]) is True
    again = service.generate(["beef", "rice"])

    assert again == first
    assert service.get(first["id"]) == first
    assert service.shopping_list(first["id"])


def test_generate_from_image_without_ingredients(make_config, patch_detectors, image_file):
    from conftest import FakeDetector
    patch_detectors(gemini=FakeDetector("gemini", ingredients=[]),
                    openai=FakeDetector("openai", ingredients=[]))
    out = RecipeService(make_config()).generate_from_image([image_file()])

    assert out["recipe"] is None
    assert out["detection"]["success"] is False


# ---------- planning ----------

def test_shopping_list_and_cost():
    recipe = {
        "servings": 2,
        "ingredients": [
            {"name": "beef", "quantity": 500.0, "unit": "g", "is_royco_product": False},
            {"name": "Royco Beef Cubes", "quantity": 2.0, "unit": "cube", "is_royco_product": True},
            {"name": "salt", "quantity": 0.5, "unit": "tsp"},
        ],
        "royco_products": {"products": [{"name": "Royco Beef Cubes", "amount": "2 cubes"}]},
    }
    assert generate_shopping_list(recipe) == ["500 g beef", "0.5 tsp salt", "2 cubes Royco Beef Cubes"]
    assert estimate_recipe_cost(recipe) == 350


def test_variations_keep_order_and_report_failures():
    def generate(ingredients, prefs):
        if prefs["cuisine"] == "Swahili":
            raise RuntimeError("provider down")
        return {"title": f"{prefs['cuisine']} {ingredients[0]}"}

    out = generate_recipe_variations(generate, ["beans"], count=3)

    assert out[0] == {"success": True, "recipe": {"title": "Kenyan beans"}}
    assert out[1]["success"] is False
    assert out[1]["error"] == "provider down"
    assert out[1]["preferences"] == {"cuisine": "Swahili", "difficulty": "medium"}
    assert out[2]["recipe"]["title"] == "Ethiopian beans"
    assert generate_recipe_variations(generate, ["beans"], count=0) == []


@pytest.mark.parametrize("count,last", [(1, "Kenyan"), (5, "Kenyan"), (4, "Indian")])
def test_variation_preferences_cycle(count, last):
    prefs = variation_preferences(count)
    assert len(prefs) == count
    assert prefs[-1]["cuisine"] == last
