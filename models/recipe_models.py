"""
Recipe-related data models for the SnapCook application.

Catalog recipes are immutable once loaded; scored recipes are recomputed on
every ranking request and never stored.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class RecipeDefinition:
    """
    Built-in catalog recipe.
    Ingredients are display names ("Olive Oil"); matching lowercases them.
    """
    id: str
    title: str
    minutes: int
    ingredients: Tuple[str, ...] = field(default_factory=tuple)
    steps: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Ensure ingredients and steps are tuples"""
        object.__setattr__(self, 'ingredients', tuple(self.ingredients))
        object.__setattr__(self, 'steps', tuple(self.steps))

    def ingredient_keys(self) -> Tuple[str, ...]:
        """Lowercased ingredient names used as pantry lookup keys"""
        return tuple(name.lower() for name in self.ingredients)

    def is_quick(self, quick_minutes: int = 20) -> bool:
        """Check if recipe qualifies for the quick-recipe boost"""
        return self.minutes <= quick_minutes


@dataclass(frozen=True)
class ScoredRecipe:
    """Catalog recipe with its match score against the current pantry"""
    recipe: RecipeDefinition
    score: float

    @property
    def id(self) -> str:
        return self.recipe.id

    @property
    def title(self) -> str:
        return self.recipe.title

    @property
    def minutes(self) -> int:
        return self.recipe.minutes

    @property
    def ingredients_text(self) -> str:
        return ', '.join(self.recipe.ingredients)

    @property
    def steps_text(self) -> str:
        return ' '.join(self.recipe.steps)

    def to_display_row(self) -> Tuple[str, int, str, str, float]:
        """Format recipe for display: (title, minutes, ingredients, steps, score)"""
        return (self.title, self.minutes, self.ingredients_text, self.steps_text, self.score)
