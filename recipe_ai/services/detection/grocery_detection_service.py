# grocery_detection_service.py
"""
Pantry scans: detect grocery items, categorize them and estimate expiry.
"""

import re
import uuid
import logging
from datetime import date, timedelta
from typing import Dict, List, Optional

from .detector_factory import DetectorFactory
from ..shared.errors import ProviderUnavailable
from ..shared.service_config import ServiceConfig
from ...models.detection import DetectedItem, GroceryDetectionResult
from ...utils.helpers import fnum, clamp

logger = logging.getLogger(__name__)

GROCERY_CATEGORIES = ("produce", "dairy", "meat", "grain", "canned",
                      "snack", "beverage", "condiment", "frozen", "other")

CATEGORY_EXPIRY_DAYS = {
    "produce": 7,
    "dairy": 14,
    "meat": 3,
    "grain": 180,
    "canned": 365,
    "snack": 90,
    "beverage": 180,
    "condiment": 365,
    "frozen": 90,
    "other": 30,
}

MIN_CONFIDENCE = 0.5
DEFAULT_CONFIDENCE = 0.7
MOCK_MESSAGE = "Using demo data for testing"

# first match wins
_CATEGORY_RULES = [
    ("produce", r"apple|banana|orange|grape|berry|mango|pear|peach|plum|melon|tomato|potato|carrot|onion"
                r"|lettuce|spinach|kale|broccoli|cucumber|pepper"),
    ("dairy", r"milk|cheese|yogurt|butter|cream|eggs?"),
    ("meat", r"chicken|beef|pork|fish|salmon|tuna|turkey|lamb|bacon|sausage|ham"),
    ("grain", r"bread|rice|pasta|cereal|flour|oats|quinoa|wheat|barley"),
    ("canned", r"canned|tin|beans|soup|sauce"),
    ("snack", r"chip|cookie|cracker|candy|chocolate|popcorn|nuts|bar"),
    ("beverage", r"juice|soda|water|tea|coffee|drink|beer|wine"),
    ("condiment", r"sauce|ketchup|mustard|mayo|dressing|oil|vinegar|spice|salt|pepper|sugar"),
    ("frozen", r"frozen|ice cream|pizza"),
]
_CATEGORY_RES = [(cat, re.compile(pattern, re.I)) for cat, pattern in _CATEGORY_RULES]


def categorize_grocery_item(name: str) -> str:
    for category, rx in _CATEGORY_RES:
        if rx.search(name or ""):
            return category
    return "other"


def process_items(raw: List, today: Optional[date] = None) -> List[DetectedItem]:
    """Validate raw provider items and attach category and expiry estimates."""
    today = today or date.today()
    items: List[DetectedItem] = []
    for entry in raw or []:
        if not isinstance(entry, dict):
            continue
        name = str(entry.get("name") or "").strip()
        if not name:
            continue
        category = str(entry.get("category") or "").strip().lower()
        if category not in GROCERY_CATEGORIES:
            category = categorize_grocery_item(name)

        conf = entry.get("confidence")
        conf = DEFAULT_CONFIDENCE if conf is None else clamp(fnum(conf, DEFAULT_CONFIDENCE))
        if conf < MIN_CONFIDENCE:
            continue

        days = CATEGORY_EXPIRY_DAYS.get(category, 30)
        items.append(DetectedItem(
            id=f"item_{uuid.uuid4().hex[:12]}",
            name=name,
            title=name,
            category=category,
            quantity=fnum(entry.get("quantity"), 1) or 1,
            unit=str(entry.get("unit") or "piece"),
            confidence=round(conf, 4),
            expiry_estimate=days,
            expiry_date=(today + timedelta(days=days)).isoformat(),
        ))
    return items


def _mean_confidence(items: List[DetectedItem]) -> float:
    if not items:
        return 0.0
    return round(sum(i.confidence for i in items) / len(items), 4)


class GroceryDetectionService:

    def __init__(self, config: ServiceConfig):
        self.config = config

    def detect(self, image_paths: List[str]) -> GroceryDetectionResult:
        """First provider that answers wins; demo data when all fail and mocks are allowed."""
        errors: List[str] = []
        for provider in self.config.grocery_providers:
            try:
                strategy = DetectorFactory.create(provider)
            except ValueError as e:
                logger.warning("skipping grocery provider: %s", e)
                continue
            if not strategy.is_available(self.config):
                continue
            try:
                raw = strategy.detect_groceries(self.config, image_paths)
            except ProviderUnavailable as e:
                logger.info("%s unavailable: %s", provider, e)
                continue
            except Exception as e:
                logger.warning("%s grocery detection failed: %s", provider, e)
                errors.append(f"{provider}: {e}")
                continue
            items = process_items(raw)
            return GroceryDetectionResult(success=True, items=items, method=provider,
                                          total_confidence=_mean_confidence(items))

        if self.config.allow_mock_detection:
            logger.info("all grocery providers failed, returning demo data")
            items = process_items(DetectorFactory.create("mock").detect_groceries(self.config, image_paths))
            return GroceryDetectionResult(success=True, items=items, method="mock", message=MOCK_MESSAGE,
                                          total_confidence=_mean_confidence(items))

        return GroceryDetectionResult(success=False, method="none",
                                      message="; ".join(errors) or "No vision provider is configured")

    def detect_batch(self, image_paths: List[str]) -> GroceryDetectionResult:
        """Analyze each image on its own, then dedupe items by name."""
        results = [self.detect([p]) for p in image_paths]
        ok = [r for r in results if r.success]

        unique: Dict[str, DetectedItem] = {}
        for r in ok:
            for item in r.items:
                key = item.name.lower()
                if key not in unique or item.confidence > unique[key].confidence:
                    unique[key] = item

        methods = sorted({r.method for r in ok})
        return GroceryDetectionResult(
            success=bool(ok),
            items=list(unique.values()),
            method=",".join(methods) if methods else "none",
            message=None if ok else (results[0].message if results else "No images provided"),
            total_confidence=round(sum(r.total_confidence for r in ok) / len(ok), 4) if ok else 0.0,
        )
