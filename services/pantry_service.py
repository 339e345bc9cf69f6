"""
Pantry aggregation service for SnapCook application.

Folds the per-image detection history and the user's manual edits into a
single ingredient count mapping. The pantry is always recomputed from its
inputs, never updated in place.
"""

from typing import Dict, Iterable, List, Tuple

from models import ImageDetectionResult, EditSet
from utils import get_logger

logger = get_logger(__name__)

PantryState = Dict[str, int]


def aggregate_pantry(history: Iterable[ImageDetectionResult], edits: EditSet) -> PantryState:
    """
    Combine detection history and edits into ingredient counts.

    Each image contributes at most one count per label. Labels the user removed
    are suppressed from every image, past and future, until edits are reset.
    Manual additions always count, once per occurrence.

    Args:
        history: Detection results, one per processed image
        edits: User removals and additions

    Returns:
        Insertion-ordered mapping of canonical label to positive count
    """
    removed = {label.lower() for label in edits.removed}
    counts: PantryState = {}

    for result in history:
        for label in result:
            key = label.lower()
            if key in removed:
                continue
            counts[key] = counts.get(key, 0) + 1

    for key in edits.added:
        counts[key] = counts.get(key, 0) + 1

    logger.debug(f"Aggregated pantry: {len(counts)} ingredients, {len(removed)} suppressed")
    return counts


def pantry_rows(pantry: PantryState) -> List[Tuple[str, int]]:
    """Pantry as (label, count) pairs in listing order"""
    return list(pantry.items())


def format_pantry_chip(label: str, count: int) -> str:
    """Chip text shown for one pantry entry"""
    return f"{label} ×{count}"
