"""
Label normalization service for SnapCook application.

Maps noisy classifier labels ("Granny Smith apple", "hot dog, frankfurter")
onto the short canonical ingredient names the pantry and recipe matching use.
Non-food objects (the pan, the plate, the phone on the counter) are discarded.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from models import RawDetection, ImageDetectionResult
from utils import get_logger

logger = get_logger(__name__)

MAX_LABEL_WORDS = 2
DEFAULT_CONFIDENCE_THRESHOLD = 0.25


@dataclass(frozen=True)
class LabelRule:
    """
    One entry of the normalization rule table.

    A rule with replacement=None discards the label. Within a category only
    the first matching rule fires.
    """
    name: str
    category: str
    pattern: re.Pattern
    replacement: Optional[str] = None

    @property
    def is_discard(self) -> bool:
        return self.replacement is None

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text, count=1)


def _deny(category: str, *terms: str) -> LabelRule:
    """Whole-word denylist rule, plurals included"""
    pattern = re.compile(r"\b(?:%s)(?:s|es)?\b" % "|".join(terms), re.IGNORECASE)
    return LabelRule(name=f"deny_{category}", category=category, pattern=pattern)


def _collapse(name: str, category: str, regex: str, replacement: str) -> LabelRule:
    """Rule that rewrites the whole label once the regex is found in it"""
    pattern = re.compile(r"^.*%s.*$" % regex, re.IGNORECASE)
    return LabelRule(name=name, category=category, pattern=pattern, replacement=replacement)


DENYLIST_RULES = (
    _deny("cookware", "pan", "frypan", "wok", "skillet", "saucepan", "spatula", "ladle", "whisk", "teapot", "coffeepot"),
    _deny("packaging", "packet", "bottle", "box", "carton", "crate", "bag", "jar", "can", "wrapper"),
    _deny("dishware", "dish", "plate", "bowl", "mug", "cup", "napkin", "tray", "dishrag"),
    _deny("flatware", "spoon", "fork", "knife", "knives", "chopstick"),
    _deny("fixtures", "stove", "oven", "microwave", "sink", "washbasin", "refrigerator", "icebox", "dishwasher", "toaster", "countertop"),
    _deny("electronics", "laptop", "phone", "telephone", "keyboard", "computer", "monitor", "remote control"),
)

REWRITE_RULES = (
    # ImageNet-style synonym lists: keep the first name only
    LabelRule(name="first_synonym", category="synonyms",
              pattern=re.compile(r"\s*,.*$"), replacement=""),

    _collapse("bell_pepper", "pepper", r"\b(?:bell|red|green)\s+peppers?\b", "bell pepper"),

    _collapse("hot_dog", "meat", r"\bhot\s?dogs?\b", "sausage"),
    _collapse("burger", "meat", r"\b(?:ham|cheese)burgers?\b", "ground beef"),

    # Bread phrasings only; "meat loaf" is left alone
    LabelRule(name="loaf", category="bakery",
              pattern=re.compile(r"^(?:(?:french|bread|sourdough|white|wheat)\s+)?(?:loaf|loaves)(?:\s+of\s+bread)?$", re.IGNORECASE),
              replacement="bread"),

    _collapse("spaghetti", "pasta", r"\bspaghetti\b(?!\s+squash)", "pasta"),

    _collapse("tomato", "produce", r"\btomato(?:es)?\b", "tomato"),
    _collapse("broccoli", "produce", r"\bbroccoli\b", "broccoli"),
    _collapse("carrot", "produce", r"\bcarrots?\b", "carrot"),
    _collapse("cucumber", "produce", r"\bcucumbers?\b", "cucumber"),
    _collapse("lemon", "produce", r"\blemons?\b", "lemon"),
    _collapse("lime", "produce", r"\blimes?\b", "lime"),

    _collapse("egg", "dairy", r"\beggs?\b", "eggs"),
    _collapse("cheese", "dairy", r"\bcheeses?\b", "cheese"),
    _collapse("milk", "dairy", r"\bmilk\b", "milk"),
)

DEFAULT_RULES = DENYLIST_RULES + REWRITE_RULES


class LabelNormalizer:
    """
    Stateless label normalizer driven by an ordered rule table.

    Pipeline per label:
    1. reject denylisted non-food objects
    2. rewrite verbose or varietal names to a canonical food term
    3. lowercase and keep at most the first two words
    """

    def __init__(self, rules: Sequence[LabelRule] = DEFAULT_RULES, max_words: int = MAX_LABEL_WORDS):
        self.rules = tuple(rules)
        self.max_words = max_words

    def normalize(self, raw_label: Optional[str]) -> Optional[str]:
        """
        Normalize one classifier label.

        Returns:
            Canonical label, or None when the label should be discarded
        """
        if raw_label is None:
            return None

        text = raw_label.strip()
        if not text:
            return None

        fired_categories = set()
        for rule in self.rules:
            if rule.category in fired_categories or not rule.matches(text):
                continue
            if rule.is_discard:
                logger.debug(f"Discarded '{raw_label}' ({rule.name})")
                return None
            text = rule.apply(text)
            fired_categories.add(rule.category)

        tokens = text.lower().split()
        if not tokens:
            return None
        return ' '.join(tokens[:self.max_words])

    def normalize_detections(self, detections: Iterable[RawDetection],
                             threshold: float = DEFAULT_CONFIDENCE_THRESHOLD) -> List[str]:
        """
        Filter detections by confidence, normalize, and collapse duplicates.

        Args:
            detections: Classifier output for a single image
            threshold: Minimum confidence kept (inclusive)

        Returns:
            Distinct canonical labels in first-seen order
        """
        labels = []
        for detection in detections:
            if detection.confidence < threshold:
                continue
            label = self.normalize(detection.label)
            if label and label not in labels:
                labels.append(label)
        return labels

    def build_image_result(self, image_ref: Optional[str], detections: Iterable[RawDetection],
                           threshold: float = DEFAULT_CONFIDENCE_THRESHOLD) -> ImageDetectionResult:
        """Build the per-image detection result for one classified image"""
        labels = self.normalize_detections(detections, threshold)
        logger.info(f"Image {image_ref}: {len(labels)} ingredients detected {labels}")
        return ImageDetectionResult(labels=tuple(labels), image_ref=image_ref)


# Global service instance
_label_normalizer: Optional[LabelNormalizer] = None


def get_label_normalizer() -> LabelNormalizer:
    """Get singleton label normalizer instance"""
    global _label_normalizer
    if _label_normalizer is None:
        _label_normalizer = LabelNormalizer()
    return _label_normalizer


def normalize_label(raw_label: Optional[str]) -> Optional[str]:
    """Normalize one label with the default rule table"""
    return get_label_normalizer().normalize(raw_label)
