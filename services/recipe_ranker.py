"""
Recipe ranking service for SnapCook application.

Scores every catalog recipe against the current pantry and returns the best
matches. Core functionality for the "find meal ideas" feature.
"""

from typing import Iterable, List, Mapping

from models import RecipeDefinition, ScoredRecipe
from utils import get_logger

logger = get_logger(__name__)

QUICK_RECIPE_BONUS = 0.12
QUICK_RECIPE_MINUTES = 20
DEFAULT_RECIPE_LIMIT = 20


def count_ingredient_hits(recipe: RecipeDefinition, pantry: Mapping[str, int]) -> int:
    """Number of recipe ingredients present in the pantry (count > 0)"""
    return sum(1 for key in recipe.ingredient_keys() if pantry.get(key, 0) > 0)


def score_recipe(recipe: RecipeDefinition, pantry: Mapping[str, int],
                 quick_bonus: float = QUICK_RECIPE_BONUS,
                 quick_minutes: int = QUICK_RECIPE_MINUTES) -> float:
    """
    Score one recipe against the pantry.

    Score is the fraction of ingredients on hand plus a flat bonus for quick
    recipes. The bonus can lift a partial quick match above a full slow one.
    A recipe without ingredients scores 0.
    """
    if not recipe.ingredients:
        logger.warning(f"Recipe '{recipe.id}' has no ingredients, scoring 0")
        return 0.0

    base = count_ingredient_hits(recipe, pantry) / len(recipe.ingredients)
    speed_bonus = quick_bonus if recipe.is_quick(quick_minutes) else 0.0
    return base + speed_bonus


def rank_recipes(pantry: Mapping[str, int], catalog: Iterable[RecipeDefinition],
                 limit: int = DEFAULT_RECIPE_LIMIT,
                 quick_bonus: float = QUICK_RECIPE_BONUS,
                 quick_minutes: int = QUICK_RECIPE_MINUTES) -> List[ScoredRecipe]:
    """
    Rank catalog recipes by score, best first.

    Args:
        pantry: Canonical label to count mapping
        catalog: Candidate recipes; their order breaks score ties
        limit: Maximum number of recipes returned

    Returns:
        At most `limit` scored recipes, sorted by descending score
    """
    scored = [
        ScoredRecipe(recipe=recipe, score=score_recipe(recipe, pantry, quick_bonus, quick_minutes))
        for recipe in catalog
    ]

    # list.sort is stable, so equal scores keep catalog order
    scored.sort(key=lambda item: item.score, reverse=True)

    ranked = scored[:max(limit, 0)]
    logger.info(f"Ranked {len(scored)} recipes, returning top {len(ranked)}")
    return ranked
