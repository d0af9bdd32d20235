# ingredient_detection_service.py
"""
Camera ingredient detection: walks the configured vision providers and
merges what they report into one ranked ingredient list.
"""

import time
import logging
from typing import Dict, List, Optional

from .detector_factory import DetectorFactory
from ..shared.errors import ProviderUnavailable
from ..shared.response_cache import ResponseCache, hash_files
from ..shared.service_config import ServiceConfig
from ...models.detection import DetectedFood, IngredientDetectionResult
from ...utils.helpers import fnum, clamp

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE = 0.8
SECONDARY_WEIGHT = 0.9
ENOUGH_INGREDIENTS = 3
MAX_INGREDIENTS = 10
NO_INGREDIENTS_ERROR = "No ingredients detected in the image"


def normalize_detected_foods(raw: List) -> List[DetectedFood]:
    """Coerce provider output into DetectedFood rows; nameless entries are dropped."""
    foods: List[DetectedFood] = []
    for entry in raw or []:
        if isinstance(entry, str):
            entry = {"name": entry}
        if not isinstance(entry, dict):
            continue
        name = str(entry.get("name") or "").strip()
        if not name:
            continue
        # a reported 0 counts as missing
        conf = fnum(entry.get("confidence"), 0.0) or DEFAULT_CONFIDENCE
        box = entry.get("bounding_box") or entry.get("boundingBox")
        foods.append(DetectedFood(name=name, confidence=round(clamp(conf), 4),
                                  bounding_box=box if isinstance(box, list) else None))
    return foods


def merge_detections(merged: Dict[str, DetectedFood], foods: List[DetectedFood], primary: bool) -> None:
    """
    Fold one provider's foods into ``merged`` (keyed by lower-cased name).
    The primary provider keeps its best confidence per name; later providers
    only add new names, at a reduced weight.
    """
    for food in foods:
        key = food.name.lower()
        if primary:
            if key not in merged or merged[key].confidence < food.confidence:
                merged[key] = food
        elif key not in merged:
            merged[key] = DetectedFood(name=food.name,
                                       confidence=round(food.confidence * SECONDARY_WEIGHT, 4),
                                       bounding_box=food.bounding_box)


class IngredientDetectionService:

    def __init__(self, config: ServiceConfig, cache: Optional[ResponseCache] = None):
        self.config = config
        self.cache = cache or ResponseCache.from_config(config)

    def detect(self, image_paths: List[str]) -> IngredientDetectionResult:
        t0 = time.perf_counter()
        cache_key = self.cache.key("ingredients", hash_files(image_paths))
        cached = self.cache.get(cache_key)
        if cached:
            return _result_from_dict(cached)

        merged: Dict[str, DetectedFood] = {}
        methods: List[str] = []
        errors: List[str] = []
        for provider in self.config.ingredient_providers:
            if methods and len(merged) >= ENOUGH_INGREDIENTS:
                break
            foods = self._run_provider(provider, image_paths, errors)
            if not foods:
                continue
            merge_detections(merged, foods, primary=not methods)
            methods.append(provider)

        ranked = sorted(merged.values(), key=lambda f: f.confidence, reverse=True)[:MAX_INGREDIENTS]
        ms = round((time.perf_counter() - t0) * 1000.0, 2)
        if not ranked:
            logger.info("no ingredients detected (%s)", "; ".join(errors) or "empty replies")
            return IngredientDetectionResult(success=False, method=methods,
                                             error=NO_INGREDIENTS_ERROR, processing_ms=ms)

        result = IngredientDetectionResult(success=True, ingredients=ranked, method=methods, processing_ms=ms)
        self.cache.set(cache_key, result.to_dict())
        return result

    def _run_provider(self, provider: str, image_paths: List[str], errors: List[str]) -> List[DetectedFood]:
        try:
            strategy = DetectorFactory.create(provider)
        except ValueError as e:
            logger.warning("skipping ingredient provider: %s", e)
            return []
        if not strategy.is_available(self.config):
            return []
        try:
            return normalize_detected_foods(strategy.detect_ingredients(self.config, image_paths))
        except ProviderUnavailable as e:
            logger.info("%s unavailable: %s", provider, e)
        except Exception as e:
            logger.warning("%s ingredient detection failed: %s", provider, e)
            errors.append(f"{provider}: {e}")
        return []


def _result_from_dict(data: Dict) -> IngredientDetectionResult:
    return IngredientDetectionResult(
        success=bool(data.get("success")),
        ingredients=[DetectedFood(**f) for f in data.get("ingredients") or []],
        method=list(data.get("method") or []),
        error=data.get("error"),
        processing_ms=fnum(data.get("processing_ms")),
    )
