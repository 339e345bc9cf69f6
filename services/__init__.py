"""
Services package for SnapCook application.

Contains the label normalization, pantry aggregation, recipe ranking,
and session services.
"""

from .label_normalizer import LabelNormalizer, LabelRule, get_label_normalizer, normalize_label
from .pantry_service import aggregate_pantry, pantry_rows, format_pantry_chip
from .recipe_ranker import score_recipe, rank_recipes
from .recipe_catalog import RECIPE_CATALOG, get_recipe_catalog
from .session_service import PantrySession

__all__ = [
    'LabelNormalizer',
    'LabelRule',
    'get_label_normalizer',
    'normalize_label',
    'aggregate_pantry',
    'pantry_rows',
    'format_pantry_chip',
    'score_recipe',
    'rank_recipes',
    'RECIPE_CATALOG',
    'get_recipe_catalog',
    'PantrySession'
]
