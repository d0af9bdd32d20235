import pytest
from conftest import FakeGenerator

from recipe_ai.services.recipes import recipe_streamer
from recipe_ai.services.recipes.recipe_streamer import RecipeStreamer
from recipe_ai.services.shared.errors import StoreError
from recipe_ai.services.shared.recipe_store import LocalRecipeStore
from recipe_ai.utils.helpers import sse_unpack


class BrokenStore(LocalRecipeStore):
    def save(self, recipe):
        raise StoreError("disk full")


def _events(frames):
    out = []
    for frame in frames:
        name, data = sse_unpack(frame)
        if name:
            out.append((name, data))
    return out


def _raise(msg):
    def _node(state):
        raise RuntimeError(msg)
    return _node


@pytest.fixture
def streamer(make_config, patch_generators, tmp_path):
    patch_generators(FakeGenerator("gemini", recipe={"name": "Beef Stew", "ingredients": ["beef"],
                                                     "steps": ["Simmer"]}))
    return RecipeStreamer(make_config(), LocalRecipeStore(str(tmp_path / "store")))


def test_stream_saves_and_finishes(streamer):
    events = _events(streamer.stream_generation(["beef"], {"cuisine": "Kenyan"}))

    assert [name for name, _ in events] == ["recipe", "royco", "image", "done"]
    recipe = events[-1][1]["recipe"]
    assert streamer.store.get(recipe["id"]) == recipe


def test_store_failure_ends_the_stream(make_config, patch_generators, tmp_path):
    patch_generators()
    streamer = RecipeStreamer(make_config(), BrokenStore(str(tmp_path / "store")))

    events = _events(streamer.stream_generation(["beef"]))

    assert [name for name, _ in events][:3] == ["recipe", "royco", "image"]
    assert events[-2] == ("error", {"stage": "save", "msg": "disk full"})
    assert events[-1] == ("done", {"error": "store_failed"})


@pytest.mark.parametrize("node, stage, code, seen", [
    ("generate_recipe", "recipe", "generation_failed", []),
    ("apply_royco", "royco", "royco_failed", ["recipe"]),
    ("illustrate_recipe", "image", "image_failed", ["recipe", "royco"]),
])
def test_failing_node_ends_the_stream(streamer, monkeypatch, node, stage, code, seen):
    monkeypatch.setattr(recipe_streamer, node, _raise("boom"))

    events = _events(streamer.stream_generation(["beef"]))

    assert [name for name, _ in events] == seen + ["error", "done"]
    assert events[-2] == ("error", {"stage": stage, "msg": "boom"})
    assert events[-1] == ("done", {"error": code})
    assert streamer.store.list() == []


def test_invalid_recipe_is_not_saved(streamer, monkeypatch):
    def bad_image(state):
        state["image"], state["image_prompt"] = "not-a-url", ""
        return state
    monkeypatch.setattr(recipe_streamer, "illustrate_recipe", bad_image)

    events = _events(streamer.stream_generation(["beef"]))

    assert [name for name, _ in events] == ["recipe", "royco", "image", "error", "done"]
    assert events[-2][1]["stage"] == "format"
    assert "recipe_validation_failed" in events[-2][1]["msg"]
    assert events[-1] == ("done", {"error": "validation_failed"})
    assert streamer.store.list() == []


def test_job_status_after_a_failed_stream(client, monkeypatch):
    monkeypatch.setattr(recipe_streamer, "apply_royco", _raise("royco down"))

    job_id = client.post("/recipes/jobs", json={"ingredients": ["chicken", "rice"]}).get_json()["job_id"]
    body = client.get(f"/recipes/generate_sse?job_id={job_id}").get_data(as_text=True)
    events = _events(body.split("\n\n"))
    assert [name for name, _ in events] == ["recipe", "error", "done"]

    status = client.get(f"/recipes/status?job_id={job_id}").get_json()
    assert status["last_phase"] == "done"
    assert status["flags"] == {"recipe": True, "error": True, "done": True}
    assert status["stage"] == "royco"
    assert status["error"] == "royco_failed"
