#!/usr/bin/env python3
"""
Test script for recipe ranking service.
Tests scoring, quick-recipe bonus ordering, stable ties, the result cap,
and ranking the built-in catalog.
"""

import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from models import RecipeDefinition
from services.recipe_catalog import get_recipe_catalog
from services.recipe_ranker import score_recipe, rank_recipes, count_ingredient_hits


def _recipe(recipe_id, minutes, ingredients):
    return RecipeDefinition(
        id=recipe_id, title=recipe_id.title(), minutes=minutes,
        ingredients=ingredients, steps=("Cook.",)
    )


def _close(a, b):
    return abs(a - b) < 1e-9


def test_score_recipe():
    """Test hit fraction and quick bonus"""
    print("Testing Recipe Scoring...")

    recipe = _recipe("toast", 30, ["Bread", "Butter", "Olive Oil", "Jam"])
    pantry = {"bread": 5, "olive oil": 1, "salt": 1}

    assert count_ingredient_hits(recipe, pantry) == 2
    assert _close(score_recipe(recipe, pantry), 0.5)
    print("[OK] Hits counted once regardless of pantry count")

    quick = _recipe("quick-toast", 20, ["Bread", "Butter", "Olive Oil", "Jam"])
    assert _close(score_recipe(quick, pantry), 0.62)
    assert _close(score_recipe(quick, {}), 0.12)
    print("[OK] Quick bonus applied at 20 minutes")

    assert _close(score_recipe(quick, pantry, quick_bonus=0.3, quick_minutes=15), 0.5)
    assert _close(score_recipe(quick, pantry, quick_bonus=0.3, quick_minutes=25), 0.8)
    print("[OK] Bonus settings overridable")

    # Zero counts are not hits
    assert count_ingredient_hits(recipe, {"bread": 0}) == 0


def test_empty_ingredient_list():
    """Test that a recipe without ingredients scores 0 instead of failing"""
    print("\nTesting Empty Ingredient List...")

    empty = _recipe("air", 5, [])
    assert score_recipe(empty, {"bread": 1}) == 0.0
    ranked = rank_recipes({}, [empty])
    assert len(ranked) == 1 and ranked[0].score == 0.0
    print("[OK] Degenerate recipe scores 0")


def test_quick_bonus_ordering():
    """Test that the quick bonus can outrank slower recipes"""
    print("\nTesting Quick Bonus Ordering...")

    slow_none = _recipe("slow-none", 30, ["A", "B", "C", "D", "E"])
    quick_none = _recipe("quick-none", 15, ["F", "G", "H"])
    slow_one = _recipe("slow-one", 30, ["Tomato", "I", "J"])

    ranked = rank_recipes({"tomato": 1}, [slow_none, quick_none, slow_one])
    assert [r.id for r in ranked] == ["slow-one", "quick-none", "slow-none"]
    assert _close(ranked[0].score, 1 / 3)
    assert _close(ranked[1].score, 0.12)
    assert _close(ranked[2].score, 0.0)
    print("[OK] 1/3 slow > 0/3 quick > 0/5 slow")

    # A partial quick match (9/10) can beat a full slow match
    names = [f"Item {i}" for i in range(9)]
    pantry = {name.lower(): 1 for name in names}
    slow_full = _recipe("slow-full", 45, names[:2])
    quick_most = _recipe("quick-most", 10, names + ["Saffron"])
    ranked = rank_recipes(pantry, [slow_full, quick_most])
    assert [r.id for r in ranked] == ["quick-most", "slow-full"]
    assert _close(ranked[0].score, 1.02) and _close(ranked[1].score, 1.0)
    print("[OK] Bonus trade-off preserved")


def test_stable_ties():
    """Test that equal scores keep catalog order"""
    print("\nTesting Stable Ties...")

    catalog = [
        _recipe("first", 30, ["Rice", "Beans"]),
        _recipe("second", 30, ["Rice", "Corn"]),
        _recipe("third", 10, ["Nothing"]),
        _recipe("fourth", 30, ["Rice", "Peas"]),
    ]
    ranked = rank_recipes({"rice": 1}, catalog)
    assert [r.id for r in ranked] == ["first", "second", "fourth", "third"]

    ranked = rank_recipes({}, list(reversed(catalog)))
    assert [r.id for r in ranked] == ["third", "fourth", "second", "first"]
    print("[OK] Catalog order breaks ties")


def test_limit():
    """Test that ranking is capped at the limit"""
    print("\nTesting Result Cap...")

    catalog = [_recipe(f"recipe-{i}", 30, ["Rice"] + [f"X{j}" for j in range(i)]) for i in range(25)]
    ranked = rank_recipes({"rice": 1}, catalog, limit=20)

    assert len(ranked) == 20
    # Fewer ingredients means a higher fraction of hits
    assert [r.id for r in ranked] == [f"recipe-{i}" for i in range(20)]
    assert len(rank_recipes({"rice": 1}, catalog)) == 20
    assert rank_recipes({"rice": 1}, catalog, limit=0) == []
    assert len(rank_recipes({"rice": 1}, catalog[:5], limit=20)) == 5
    print("[OK] Top 20 of 25 returned")


def test_catalog_end_to_end():
    """Test ranking the built-in catalog"""
    print("\nTesting Built-in Catalog...")

    catalog = get_recipe_catalog()
    assert len(catalog) == 11

    pantry = {"tomato": 1, "mozzarella": 1, "basil": 1, "olive oil": 1, "salt": 1, "pepper": 1}
    ranked = rank_recipes(pantry, catalog)

    assert ranked[0].id == "caprese"
    assert ranked[0].title == "Quick Caprese Salad"
    assert _close(ranked[0].score, 1.12)
    assert all(r.score < ranked[0].score for r in ranked[1:])
    print(f"[OK] {ranked[0].title} ranked first at {ranked[0].score:.2f}")

    title, minutes, ingredients, steps, score = ranked[0].to_display_row()
    assert minutes == 10
    assert ingredients == "Tomato, Mozzarella, Basil, Olive Oil, Salt, Pepper"
    assert steps == "Slice tomatoes & mozzarella. Layer with basil. Drizzle olive oil; season."
    print("[OK] Display row formatted")

    ranked = rank_recipes({}, catalog)
    assert {round(r.score, 2) for r in ranked} <= {0.0, 0.12}
    assert ranked[-1].id == "lemon-chicken"
    print("[OK] Empty pantry scores only the quick bonus")


if __name__ == "__main__":
    try:
        test_score_recipe()
        test_empty_ingredient_list()
        test_quick_bonus_ordering()
        test_stable_ties()
        test_limit()
        test_catalog_end_to_end()
        print("\n[SUCCESS] All recipe ranker tests passed!")
        sys.exit(0)

    except Exception as e:
        print(f"[ERROR] Recipe ranker test failed with error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
