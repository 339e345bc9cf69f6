"""
Data models for SnapCook application.

This module contains the detection, edit, and recipe model classes consumed by
the normalization, pantry, and ranking services.
"""

from .recipe_models import RecipeDefinition, ScoredRecipe
from .detection_models import RawDetection, ImageDetectionResult, EditSet

__all__ = [
    'RecipeDefinition',
    'ScoredRecipe',
    'RawDetection',
    'ImageDetectionResult',
    'EditSet'
]
