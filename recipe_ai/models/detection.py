from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field, asdict


@dataclass
class DetectedFood:
    """One ingredient seen by the camera"""
    name: str
    confidence: float
    bounding_box: Optional[List[float]] = None


@dataclass
class DetectedItem:
    """One pantry item with an estimated shelf life"""
    id: str
    name: str
    title: str
    category: str
    quantity: float
    unit: str
    confidence: float
    expiry_estimate: int
    expiry_date: str


@dataclass
class IngredientDetectionResult:
    success: bool
    ingredients: List[DetectedFood] = field(default_factory=list)
    method: List[str] = field(default_factory=list)
    error: Optional[str] = None
    processing_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class GroceryDetectionResult:
    success: bool
    items: List[DetectedItem] = field(default_factory=list)
    method: str = ""
    message: Optional[str] = None
    total_confidence: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
