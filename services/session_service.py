"""
Pantry session service for SnapCook application.

Owns everything a single user session accumulates: processed photos, the
per-image detection history, manual edits, and the last set of meal ideas.
The pantry and the ranking are recomputed from this state on demand.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from models import RawDetection, ImageDetectionResult, EditSet, RecipeDefinition, ScoredRecipe
from services.label_normalizer import LabelNormalizer, get_label_normalizer
from services.pantry_service import aggregate_pantry, pantry_rows, PantryState
from services.recipe_catalog import get_recipe_catalog
from services.recipe_ranker import rank_recipes
from utils import Config, get_config, get_logger, log_image_result, log_operation

logger = get_logger(__name__)

Prediction = Union[RawDetection, Dict[str, Any]]
Classifier = Callable[[str], Iterable[Prediction]]


def _to_detection(prediction: Prediction) -> RawDetection:
    if isinstance(prediction, RawDetection):
        return prediction
    return RawDetection.from_dict(prediction)


class PantrySession:
    """
    Session state for one user.

    Image results are appended one at a time, each fully normalized before
    the next image is processed. Callers must not mutate the session from
    several threads at once.
    """

    def __init__(self, catalog: Optional[Sequence[RecipeDefinition]] = None,
                 config: Optional[Config] = None,
                 normalizer: Optional[LabelNormalizer] = None):
        self.catalog = tuple(catalog) if catalog is not None else get_recipe_catalog()
        self.config = config or get_config()
        self.normalizer = normalizer or get_label_normalizer()

        self.photos: List[str] = []
        self.history: List[ImageDetectionResult] = []
        self.edits = EditSet()
        self.recommendations: List[ScoredRecipe] = []

    # Detection history

    def record_detections(self, image_ref: str, predictions: Iterable[Prediction]) -> ImageDetectionResult:
        """
        Normalize one image's classifier output and append it to the history.

        Args:
            image_ref: Opaque reference to the captured image
            predictions: Classifier output for that image

        Returns:
            The stored per-image result
        """
        detections = [_to_detection(p) for p in predictions]
        result = self.normalizer.build_image_result(
            image_ref, detections, threshold=self.config.confidence_threshold
        )
        log_image_result(logger, image_ref, len(detections), result.labels)
        self.photos.append(image_ref)
        self.history.append(result)
        return result

    def record_failed_image(self, image_ref: str) -> ImageDetectionResult:
        """Keep the photo but contribute nothing to the pantry"""
        result = ImageDetectionResult(labels=(), image_ref=image_ref)
        self.photos.append(image_ref)
        self.history.append(result)
        return result

    def process_image(self, image_ref: str, classifier: Classifier) -> ImageDetectionResult:
        """
        Classify one image and record the result.

        A classifier failure is logged and recorded as an empty result, so
        earlier and later images are unaffected.
        """
        try:
            predictions = list(classifier(image_ref))
            return self.record_detections(image_ref, predictions)
        except Exception as e:
            logger.error(f"Failed to classify image {image_ref}: {e}")
            return self.record_failed_image(image_ref)

    def process_images(self, image_refs: Iterable[str], classifier: Classifier) -> List[ImageDetectionResult]:
        """Classify several images sequentially"""
        return [self.process_image(ref, classifier) for ref in image_refs]

    # User edits

    def remove_label(self, label: str) -> bool:
        """Suppress a label from all detections"""
        removed = self.edits.remove(label)
        if removed:
            logger.info(f"Removed '{label.strip().lower()}' from pantry")
        return removed

    def add_label(self, label: str) -> bool:
        """Add a label manually; blank input is ignored"""
        added = self.edits.add(label)
        if added:
            logger.info(f"Added '{label.strip().lower()}' to pantry")
        return added

    def has_edits(self) -> bool:
        return not self.edits.is_empty()

    def undo_edits(self):
        """Drop every removal and addition"""
        self.edits.reset()
        logger.info("Undid all pantry edits")

    def clear_all(self):
        """Forget photos, detections, edits, and meal ideas"""
        self.photos = []
        self.history = []
        self.edits.reset()
        self.recommendations = []
        logger.info("Cleared session")

    # Derived state

    def pantry(self) -> PantryState:
        return aggregate_pantry(self.history, self.edits)

    def pantry_rows(self) -> List[Tuple[str, int]]:
        return pantry_rows(self.pantry())

    def find_recipes(self, limit: Optional[int] = None) -> List[ScoredRecipe]:
        """Rank the catalog against the current pantry and keep the result"""
        limit = self.config.recipe_limit if limit is None else limit
        with log_operation(logger, "rank recipes") as op:
            pantry = self.pantry()
            self.recommendations = rank_recipes(
                pantry,
                self.catalog,
                limit=limit,
                quick_bonus=self.config.quick_recipe_bonus,
                quick_minutes=self.config.quick_recipe_minutes,
            )
            op.info(f"{len(pantry)} pantry items, {len(self.recommendations)} ideas")
        return self.recommendations
