"""
Detection and edit models for the SnapCook application.

Raw detections come from the external image classifier; image results and
edit sets are the inputs the pantry is recomputed from.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class RawDetection:
    """One classifier-reported candidate object with a confidence score"""
    label: str
    confidence: float

    def __post_init__(self):
        """Reject confidences that are not a probability"""
        if not isinstance(self.label, str):
            raise ValueError(f"Label must be text, got {self.label!r}")
        if isinstance(self.confidence, bool):
            raise ValueError(f"Confidence must be a number, got {self.confidence!r}")
        try:
            confidence = float(self.confidence)
        except (TypeError, ValueError):
            raise ValueError(f"Confidence must be a number, got {self.confidence!r}") from None
        if not math.isfinite(confidence) or not 0.0 <= confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0 and 1, got {self.confidence!r}")
        object.__setattr__(self, 'confidence', confidence)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RawDetection':
        """
        Build a detection from a classifier prediction dict.

        Accepts both {"label", "confidence"} and the MobileNet-style
        {"className", "probability"} shapes.

        Raises:
            ValueError: missing fields, a non-text label, or a confidence
                outside [0, 1]
        """
        label = data.get('label', data.get('className'))
        confidence = data.get('confidence', data.get('probability'))
        if label is None or confidence is None:
            raise ValueError(f"Prediction is missing a label or confidence: {data!r}")
        return cls(label=label, confidence=confidence)


@dataclass(frozen=True)
class ImageDetectionResult:
    """
    Distinct canonical labels found in one processed image.
    Presence only: an object seen three times in one photo is listed once.
    """
    labels: Tuple[str, ...] = field(default_factory=tuple)
    image_ref: Optional[str] = None

    def __post_init__(self):
        # Collapse duplicates, keep first-seen order
        object.__setattr__(self, 'labels', tuple(dict.fromkeys(self.labels)))

    def __iter__(self):
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)

    def __contains__(self, label: object) -> bool:
        return label in self.labels


@dataclass
class EditSet:
    """
    User edits applied on top of detections.

    removed: labels suppressed from detections (idempotent)
    added: labels inserted manually (duplicates count)
    """
    removed: List[str] = field(default_factory=list)
    added: List[str] = field(default_factory=list)

    def remove(self, label: str) -> bool:
        """Suppress a label. Returns False if it was already removed."""
        key = label.strip().lower()
        if not key or key in self.removed:
            return False
        self.removed.append(key)
        return True

    def add(self, label: str) -> bool:
        """Insert a label manually. Blank input is ignored."""
        key = label.strip().lower()
        if not key:
            return False
        self.added.append(key)
        return True

    def reset(self):
        """Clear both removed and added"""
        self.removed = []
        self.added = []

    def is_empty(self) -> bool:
        return not self.removed and not self.added
