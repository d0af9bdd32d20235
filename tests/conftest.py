import io

import pytest
from PIL import Image

from recipe_ai import create_app
from recipe_ai.config.settings import TestingConfig
from recipe_ai.services.detection.detector_factory import DetectorFactory
from recipe_ai.services.detection.strategies.detector_strategy import DetectorStrategy
from recipe_ai.services.recipes.recipe_generator_factory import RecipeGeneratorFactory
from recipe_ai.services.recipes.strategies.recipe_generator_strategy import RecipeGeneratorStrategy
from recipe_ai.services.shared.errors import ProviderError
from recipe_ai.services.shared.service_config import ServiceConfig


class FakeDetector(DetectorStrategy):
    """Scripted vision provider; records how often it was asked"""

    def __init__(self, name, ingredients=None, groceries=None, error=None, available=True):
        self.name = name
        self._ingredients = ingredients
        self._groceries = groceries
        self._error = error
        self._available = available
        self.calls = 0

    def is_available(self, config):
        return self._available

    def detect_ingredients(self, config, image_paths):
        self.calls += 1
        if self._error:
            raise self._error
        return list(self._ingredients or [])

    def detect_groceries(self, config, image_paths):
        self.calls += 1
        if self._error:
            raise self._error
        return [dict(i) for i in self._groceries or []]


class FakeGenerator(RecipeGeneratorStrategy):
    """Scripted text provider. complete_text answers image prompts and Royco suggestion prompts differently."""

    def __init__(self, name="gemini", recipe=None, error=None,
                 image_prompt="A steaming bowl of fresh homemade stew on a rustic plate",
                 suggestion=None):
        self.name = name
        self._recipe = recipe
        self._error = error
        self._image_prompt = image_prompt
        self._suggestion = suggestion
        self.prompts = []

    def is_available(self, config):
        return True

    def generate_recipe(self, config, prompt):
        self.prompts.append(prompt)
        if self._error:
            raise self._error
        return dict(self._recipe or {})

    def complete_text(self, config, prompt):
        self.prompts.append(prompt)
        if "photography" in prompt:
            if isinstance(self._image_prompt, Exception):
                raise self._image_prompt
            return self._image_prompt
        if self._suggestion is None:
            raise ProviderError(self.name, "no suggestion scripted")
        return self._suggestion


@pytest.fixture
def make_config(tmp_path):
    def _make(**overrides):
        settings = {
            "UPLOAD_DIR": str(tmp_path / "uploads"),
            "DATA_DIR": str(tmp_path / "data"),
            "CACHE_DIR": str(tmp_path / "cache"),
            "CACHE_ENABLED": False,
            "RETRY_DELAY_SECONDS": 0.0,
            "ALLOW_MOCK_DETECTION": False,
            "RECIPE_STORE": "local",
        }
        settings.update(overrides)
        return ServiceConfig(settings)
    return _make


@pytest.fixture
def image_file(tmp_path):
    def _write(name="photo.jpg", payload=b"fake-jpeg-bytes"):
        p = tmp_path / name
        p.write_bytes(payload)
        return str(p)
    return _write


@pytest.fixture
def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), (200, 40, 40)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def patch_detectors(monkeypatch):
    """Route DetectorFactory.create to the given fakes; unknown names fall through."""
    def _patch(**fakes):
        real_create = DetectorFactory.create

        def fake_create(provider):
            if provider in fakes:
                return fakes[provider]
            return real_create(provider)

        monkeypatch.setattr(DetectorFactory, "create", staticmethod(fake_create))
        return fakes
    return _patch


@pytest.fixture
def patch_generators(monkeypatch):
    def _patch(*generators):
        monkeypatch.setattr(RecipeGeneratorFactory, "available", staticmethod(lambda config: list(generators)))
        return generators
    return _patch


@pytest.fixture
def app(tmp_path):
    class _Config(TestingConfig):
        UPLOAD_DIR = str(tmp_path / "uploads")
        DATA_DIR = str(tmp_path / "data")
        CACHE_DIR = str(tmp_path / "data" / "cache")
        ALLOW_MOCK_DETECTION = True

    return create_app(_Config)


@pytest.fixture
def client(app):
    return app.test_client()
