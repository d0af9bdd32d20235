import base64
import io
import json

from conftest import FakeDetector

from recipe_ai.services.detection.grocery_detection_service import MOCK_MESSAGE
from recipe_ai.services.detection.ingredient_detection_service import NO_INGREDIENTS_ERROR
from recipe_ai.services.recipes.recipe_images import CUISINE_IMAGES
from recipe_ai.utils.helpers import sse_unpack


def _upload(png_bytes, name="photo.png", field="image"):
    return {field: (io.BytesIO(png_bytes), name)}


def _events(body: str):
    out = []
    for frame in body.split("\n\n"):
        name, data = sse_unpack(frame)
        if name:
            out.append((name, data))
    return out


# ---------- health ----------

def test_health_and_config(client):
    assert client.get("/health").get_json() == {"ok": True}

    cfg = client.get("/config").get_json()
    assert cfg["recipe_store"] == "local"
    assert cfg["gemini_configured"] is False
    assert cfg["grocery_providers"] == ["openai", "gemini"]

    assert client.post("/cache/clear").get_json() == {"cleared": 0}


# ---------- royco ----------

def test_royco_products(client):
    everything = client.get("/royco/products").get_json()["products"]
    assert len(everything) == 17

    cubes = client.get("/royco/products?category=cube").get_json()["products"]
    assert {p["category"] for p in cubes} == {"cube"}

    res = client.get("/royco/products?category=candy")
    assert res.status_code == 400
    assert res.get_json()["error"] == "unknown_category"


def test_royco_rewrite_suggest_enhance(client):
    res = client.post("/royco/rewrite", json={"text": "Add beef stock and a pinch of Paprika"})
    assert res.get_json() == {"text": "Add Royco Beef Cubes and a pinch of Royco Paprika Spice"}

    res = client.post("/royco/suggest", json={"ingredients": ["chicken broth"]})
    assert "royco-chicken-cubes" in [p["id"] for p in res.get_json()["products"]]

    res = client.post("/royco/enhance", json={"recipe": {"ingredients": [{"name": "tomato paste"}]}})
    recipe = res.get_json()["recipe"]
    assert recipe["ingredients"][0]["name"] == "Royco Tomato Base"
    assert recipe["sponsored_products"] == ["Royco Tomato Base"]

    assert client.post("/royco/rewrite", json={}).status_code == 400


def test_royco_suggestions_default_without_providers(client):
    res = client.post("/royco/suggestions", json={"recipe_name": "Beef Stew", "ingredients": ["beef"]})
    data = res.get_json()
    assert res.status_code == 200
    assert [p["name"] for p in data["products"]] == ["Royco Beef Cubes", "Royco Mchuzi Mix"]

    res = client.post("/royco/suggestions", json={"ingredients": ["beef"]})
    assert res.status_code == 400
    assert res.get_json()["error"] == "invalid_request"


# ---------- detection ----------

def test_detect_ingredients_requires_an_image(client, png_bytes):
    res = client.post("/detect/ingredients", data={}, content_type="multipart/form-data")
    assert res.status_code == 400
    assert res.get_json()["error"] == "missing_file"

    res = client.post("/detect/ingredients", data=_upload(png_bytes, "photo.gif"),
                      content_type="multipart/form-data")
    assert res.status_code == 400
    assert res.get_json()["error"] == "bad_extension"

    res = client.post("/detect/ingredients", json={"image_base64": base64.b64encode(b"not an image").decode()})
    assert res.status_code == 400
    assert res.get_json()["error"] == "bad_image"


def test_detect_ingredients_upload(client, png_bytes, patch_detectors):
    patch_detectors(gemini=FakeDetector("gemini", ingredients=[
        {"name": "beef", "confidence": 0.9}, "onion", {"name": "garlic", "confidence": 0.6},
    ]))
    res = client.post("/detect/ingredients", data=_upload(png_bytes), content_type="multipart/form-data")
    data = res.get_json()

    assert res.status_code == 200
    assert data["success"] is True
    assert [f["name"] for f in data["ingredients"]] == ["beef", "onion", "garlic"]
    assert data["method"] == ["gemini"]


def test_detect_ingredients_base64_without_providers(client, png_bytes):
    b64 = "data:image/png;base64," + base64.b64encode(png_bytes).decode()
    res = client.post("/detect/ingredients", json={"image_base64": b64})

    assert res.status_code == 422
    data = res.get_json()
    assert data["error"] == "no_ingredients"
    assert data["msg"] == NO_INGREDIENTS_ERROR


def test_detect_groceries_falls_back_to_demo_data(client, png_bytes):
    res = client.post("/detect/groceries", data=_upload(png_bytes), content_type="multipart/form-data")
    data = res.get_json()

    assert res.status_code == 200
    assert data["method"] == "mock"
    assert data["message"] == MOCK_MESSAGE
    assert {i["name"] for i in data["items"]} >= {"Whole Milk", "Green Apples"}
    assert all(i["expiry_date"] for i in data["items"])


def test_detect_groceries_several_images(client, png_bytes, patch_detectors):
    patch_detectors(openai=FakeDetector("openai", groceries=[
        {"name": "Rice", "category": "grain", "quantity": 2, "unit": "kg", "confidence": 0.9},
    ]))
    res = client.post(
        "/detect/groceries",
        data={"images[]": [(io.BytesIO(png_bytes), "a.png"), (io.BytesIO(png_bytes), "b.png")]},
        content_type="multipart/form-data",
    )
    data = res.get_json()

    assert res.status_code == 200
    assert data["method"] == "openai"
    assert [i["name"] for i in data["items"]] == ["Rice"]


def test_detect_groceries_without_mock(app, client, png_bytes):
    app.config["ALLOW_MOCK_DETECTION"] = False
    res = client.post("/detect/groceries", data=_upload(png_bytes), content_type="multipart/form-data")
    assert res.status_code == 422
    assert res.get_json()["error"] == "no_groceries"


# ---------- recipes ----------

def test_generate_rejects_bad_requests(client):
    assert client.post("/recipes/generate", json={"ingredients": []}).status_code == 400
    assert client.post("/recipes/generate", json={"ingredients": ["  "]}).status_code == 400
    res = client.post("/recipes/generate",
                      json={"ingredients": ["beef"], "preferences": {"difficulty": "extreme"}})
    assert res.status_code == 400
    assert res.get_json()["error"] == "invalid_request"


def test_generate_then_manage_saved_recipe(client):
    res = client.post("/recipes/generate",
                      json={"ingredients": ["beef", " onion "], "preferences": {"cuisine": "Kenyan"}})
    assert res.status_code == 200
    recipe = res.get_json()["recipe"]
    rid = recipe["id"]

    assert recipe["title"] == "Kenyan Stew with beef"
    assert recipe["source"] == "fallback"
    assert recipe["image"] == CUISINE_IMAGES["kenyan"]
    assert [i["name"] for i in recipe["ingredients"]] == ["beef", "onion"]

    assert client.get(f"/recipes/{rid}").get_json()["id"] == rid
    assert [r["id"] for r in client.get("/recipes").get_json()["items"]] == [rid]

    shopping = client.get(f"/recipes/{rid}/shopping-list").get_json()
    assert shopping["recipe_id"] == rid
    assert "1 cup beef" in shopping["items"]
    assert "2 cubes Royco Beef Cubes" in shopping["items"]

    cost = client.get(f"/recipes/{rid}/cost").get_json()
    assert cost == {"recipe_id": rid, "currency": "KES", "estimate": 4 * 150 + 2 * 50}

    assert client.delete(f"/recipes/{rid}").get_json() == {"deleted": True, "id": rid}
    assert client.get(f"/recipes/{rid}").status_code == 404
    assert client.delete(f"/recipes/{rid}").status_code == 404
    assert client.get(f"/recipes/{rid}/cost").status_code == 404


def test_variations(client):
    res = client.post("/recipes/variations", json={"ingredients": ["beans"], "count": 2})
    variations = res.get_json()["variations"]

    assert res.status_code == 200
    assert len(variations) == 2
    assert all(v["success"] for v in variations)
    assert variations[0]["recipe"]["title"] == "Kenyan Stew with beans"
    assert variations[1]["recipe"]["cuisine"] == "Swahili"

    assert client.post("/recipes/variations", json={"ingredients": ["beans"], "count": 9}).status_code == 400


def test_from_image(client, png_bytes, patch_detectors):
    patch_detectors(gemini=FakeDetector("gemini", ingredients=["beef", "onion", "garlic"]))
    data = _upload(png_bytes)
    data["preferences"] = json.dumps({"cuisine": "Kenyan", "servings": 2})
    res = client.post("/recipes/from-image", data=data, content_type="multipart/form-data")
    body = res.get_json()

    assert res.status_code == 200
    assert body["success"] is True
    assert body["detection"]["method"] == ["gemini"]
    assert body["recipe"]["title"] == "Kenyan Stew with beef"
    assert body["recipe"]["servings"] == 2

    data = _upload(png_bytes)
    data["preferences"] = "{not json"
    res = client.post("/recipes/from-image", data=data, content_type="multipart/form-data")
    assert res.status_code == 400
    assert res.get_json()["error"] == "bad_preferences"


def test_from_image_nothing_detected(client, png_bytes):
    res = client.post("/recipes/from-image", data=_upload(png_bytes), content_type="multipart/form-data")
    assert res.status_code == 422
    assert res.get_json()["error"] == "no_ingredients"


def test_job_stream_and_status(client):
    assert client.get("/recipes/generate_sse").status_code == 400
    assert client.get("/recipes/generate_sse?job_id=nope").status_code == 404
    assert client.get("/recipes/status?job_id=nope").status_code == 404

    job_id = client.post("/recipes/jobs", json={"ingredients": ["chicken", "rice"]}).get_json()["job_id"]
    res = client.get(f"/recipes/generate_sse?job_id={job_id}")
    assert res.mimetype == "text/event-stream"

    events = _events(res.get_data(as_text=True))
    assert [name for name, _ in events] == ["recipe", "royco", "image", "done"]
    recipe_ev, royco_ev, image_ev, done_ev = (data for _, data in events)
    assert recipe_ev["name"] == "Recipe with chicken and rice"
    assert recipe_ev["source"] == "fallback"
    assert royco_ev["royco_products"]["products"]
    assert image_ev["image"].startswith("http")
    assert done_ev["recipe"]["title"] == "Recipe with chicken and rice"
    assert "generate_ms" in done_ev["timings"]

    status = client.get(f"/recipes/status?job_id={job_id}").get_json()
    assert status["last_phase"] == "done"
    assert status["flags"] == {"recipe": True, "royco": True, "image": True, "done": True}
    assert status["recipe"]["id"] == done_ev["recipe"]["id"]

    assert client.get(f"/recipes/{done_ev['recipe']['id']}").status_code == 200
