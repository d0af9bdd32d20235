import pytest

from recipe_ai.services.royco.catalog import ROYCO_PRODUCTS, get_product, products_by_category
from recipe_ai.services.royco.royco_enhancer import (
    DEFAULT_ROYCO_NOTE,
    ensure_royco_products,
    generate_royco_enhanced_prompt,
    replace_with_royco_products,
    royco_name_for,
    suggest_royco_products,
)


def test_catalog_has_seventeen_products_with_unique_ids():
    assert len(ROYCO_PRODUCTS) == 17
    assert len({p.id for p in ROYCO_PRODUCTS}) == 17
    assert get_product("royco-mchuzi-mix").display_name == "Royco Mchuzi Mix"
    assert get_product("nope") is None


def test_products_by_category():
    cubes = products_by_category("cube")
    assert [p.id for p in cubes] == ["royco-beef-cubes", "royco-chicken-cubes", "royco-vegetable-cubes"]
    assert len(products_by_category()) == 17
    with pytest.raises(ValueError):
        products_by_category("dessert")


def test_replace_uses_longest_term_and_ignores_case():
    text = "Add Turmeric Powder, black pepper powder and some BEEF STOCK."
    assert replace_with_royco_products(text) == (
        "Add Royco Turmeric Spice, Royco Black Pepper Spice and some Royco Beef Cubes."
    )


def test_replace_does_not_rebrand_branded_text():
    text = "Stir in Royco Turmeric Spice and Royco Paprika Spice."
    assert replace_with_royco_products(text) == text
    once = replace_with_royco_products("turmeric powder")
    assert once == "Royco Turmeric Spice"
    assert replace_with_royco_products(once) == once


def test_replace_matches_whole_words_only():
    assert replace_with_royco_products("paprikash") == "paprikash"
    assert replace_with_royco_products("") == ""


def test_suggest_royco_products_keeps_catalog_order():
    names = [p.id for p in suggest_royco_products(["2 cups chicken broth", "curry powder"])]
    assert "royco-chicken-cubes" in names
    assert "royco-mchuzi-mix" in names
    assert names.index("royco-chicken-cubes") < names.index("royco-mchuzi-mix")
    assert suggest_royco_products([]) == []


def test_suggest_matches_branded_names():
    ids = [p.id for p in suggest_royco_products(["Royco Tomato Base"])]
    assert ids == ["royco-tomato-base"]


def test_enhanced_prompt_wraps_base_prompt():
    prompt = generate_royco_enhanced_prompt("Make ugali.")
    assert "Make ugali." in prompt
    assert "Royco" in prompt


def test_royco_name_for_uses_table_order():
    assert royco_name_for("2 tbsp curry powder") == "Royco Mchuzi Mix"
    assert royco_name_for("onion") is None


def test_ensure_royco_products_rewrites_recipe():
    recipe = {
        "name": "Beef Stew",
        "description": "Beef simmered in beef stock.",
        "ingredients": [
            {"name": "beef stock", "quantity": "2", "unit": "cups"},
            "curry powder",
            {"name": "Royco Mchuzi Mix", "note": "already branded"},
            {"name": "onion"},
        ],
        "steps": ["Add the turmeric", {"body": "Pour in beef broth", "tips": ["Use paprika"]}],
        "chef_tips": ["Garlic powder works too"],
    }
    out = ensure_royco_products(recipe)

    beef, curry, branded, onion = out["ingredients"]
    assert beef == {"name": "Royco Beef Cubes", "quantity": "2", "unit": "cups",
                    "note": DEFAULT_ROYCO_NOTE, "royco_product": True}
    assert curry["name"] == "Royco Mchuzi Mix" and curry["royco_product"] is True
    assert branded == {"name": "Royco Mchuzi Mix", "note": "already branded", "royco_product": True}
    assert onion == {"name": "onion"}

    assert out["steps"][0] == "Add the Royco Turmeric Spice"
    assert out["steps"][1]["body"] == "Pour in Royco Beef Cubes"
    assert out["steps"][1]["tips"] == ["Use Royco Paprika Spice"]
    assert out["description"] == "Beef simmered in Royco Beef Cubes."
    assert out["chef_tips"] == ["Royco Garlic Spice works too"]

    assert out["royco_enhanced"] is True
    assert "Royco Beef Cubes" in out["sponsored_products"]
    assert "Royco Mchuzi Mix" in out["sponsored_products"]


def test_ensure_royco_products_does_not_mutate_input():
    recipe = {"ingredients": [{"name": "beef stock"}], "steps": ["add bouillon"]}
    ensure_royco_products(recipe)
    assert recipe == {"ingredients": [{"name": "beef stock"}], "steps": ["add bouillon"]}
