#!/usr/bin/env python3
"""
Test script for label normalization service.
Tests denylist rejection, rewrite rules, truncation, and per-image detection filtering.
"""

import re
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from models import RawDetection
from services.label_normalizer import LabelNormalizer, LabelRule, normalize_label


def test_denylist_rejection():
    """Test that non-food objects are discarded"""
    print("Testing Denylist Rejection...")

    non_food = [
        "frying pan", "Frying pan, frypan, skillet", "plastic bottle", "dinner plate",
        "mixing bowl", "coffee mug", "measuring cup", "wooden spoon", "carton",
        "microwave", "refrigerator, icebox", "laptop", "cellular telephone",
        "computer keyboard", "paper napkin", "plastic bag", "Dishwasher",
        "milk can", "soda can", "can opener, tin opener",
    ]
    for label in non_food:
        assert normalize_label(label) is None, f"'{label}' should be discarded"
    print(f"[OK] Discarded {len(non_food)} non-food labels")

    # Whole words only: food containing a denylisted fragment survives
    assert normalize_label("bagel") == "bagel"
    assert normalize_label("head cabbage") == "head cabbage"
    assert normalize_label("cupcake") == "cupcake"
    assert normalize_label("canned tomatoes") == "tomato"
    assert normalize_label("pecan") == "pecan"
    print("[OK] Denylist does not match inside food words")


def test_rewrite_rules():
    """Test that verbose and varietal labels collapse to canonical terms"""
    print("\nTesting Rewrite Rules...")

    expected = {
        "red bell pepper": "bell pepper",
        "green pepper": "bell pepper",
        "Bell Pepper": "bell pepper",
        "hot dog": "sausage",
        "hotdog, hot dog, red hot": "sausage",
        "cheeseburger": "ground beef",
        "hamburger": "ground beef",
        "French loaf": "bread",
        "bread loaf": "bread",
        "loaf": "bread",
        "loaves of bread": "bread",
        "spaghetti": "pasta",
        "grape tomato": "tomato",
        "cherry tomatoes on the vine": "tomato",
        "broccoli florets": "broccoli",
        "baby carrots": "carrot",
        "English cucumber": "cucumber",
        "lemon wedge": "lemon",
        "key lime": "lime",
        "brown eggs": "eggs",
        "egg": "eggs",
        "cheddar cheese block": "cheese",
        "whole milk": "milk",
    }
    for raw, canonical in expected.items():
        result = normalize_label(raw)
        assert result == canonical, f"'{raw}' -> '{result}', expected '{canonical}'"
    print(f"[OK] {len(expected)} rewrite rules produce canonical labels")

    # Spaghetti squash is a vegetable, not pasta
    assert normalize_label("spaghetti squash") == "spaghetti squash"
    # Meat loaf is not bread
    assert normalize_label("meat loaf, meatloaf") == "meat loaf"
    assert normalize_label("meatloaf") == "meatloaf"
    # Plain pepper stays seasoning
    assert normalize_label("pepper") == "pepper"
    print("[OK] Near-miss labels are left alone")


def test_canonical_labels_are_stable():
    """Test that already-canonical labels normalize to themselves"""
    print("\nTesting Canonical Label Stability...")

    canonical = [
        "tomato", "bell pepper", "sausage", "ground beef", "bread", "pasta",
        "broccoli", "carrot", "eggs", "cheese", "milk", "basil", "olive oil",
    ]
    for label in canonical:
        assert normalize_label(label) == label, f"'{label}' changed on renormalization"
    print(f"[OK] {len(canonical)} canonical labels unchanged")


def test_truncation_and_blank_input():
    """Test two-word truncation and discard of blank labels"""
    print("\nTesting Truncation...")

    assert normalize_label("Granny Smith apple") == "granny smith"
    assert normalize_label("  Banana  ") == "banana"
    assert normalize_label("butternut   squash soup") == "butternut squash"

    samples = [
        "Granny Smith apple", "hot dog, frankfurter", "very large red onion bulb",
        "cherry tomatoes on the vine", "acorn squash", "mushroom",
    ]
    for raw in samples:
        result = normalize_label(raw)
        assert result is not None
        assert len(result.split(" ")) <= 2, f"'{result}' has more than two tokens"
        assert result == result.lower()
    print("[OK] Outputs are lowercase with at most two tokens")

    assert normalize_label("") is None
    assert normalize_label("   ") is None
    assert normalize_label(None) is None
    print("[OK] Blank labels are discarded")


def test_custom_rule_table():
    """Test first-match-wins within a category and independent categories"""
    print("\nTesting Custom Rule Table...")

    rules = [
        LabelRule("deny_spoon", "deny", re.compile(r"\bspoon\b", re.IGNORECASE)),
        LabelRule("shrimp", "seafood", re.compile(r"prawns?", re.IGNORECASE), "shrimp"),
        LabelRule("crab", "seafood", re.compile(r"shrimp", re.IGNORECASE), "crab"),
        LabelRule("fresh", "descriptor", re.compile(r"^fresh\s+", re.IGNORECASE), ""),
    ]
    normalizer = LabelNormalizer(rules)

    # Second seafood rule would match "shrimp" but the category already fired
    assert normalizer.normalize("fresh prawn") == "shrimp"
    assert normalizer.normalize("soup spoon") is None
    print("[OK] Category ordering respected")


def test_normalize_detections():
    """Test confidence filtering and per-image dedup"""
    print("\nTesting Detection Filtering...")

    normalizer = LabelNormalizer()
    detections = [
        RawDetection("grape tomato", 0.61),
        RawDetection("cherry tomato", 0.30),
        RawDetection("frying pan", 0.90),
        RawDetection("basil", 0.25),
        RawDetection("lemon", 0.2499),
        RawDetection("red bell pepper", 0.40),
    ]
    labels = normalizer.normalize_detections(detections)
    assert labels == ["tomato", "basil", "bell pepper"], labels
    print(f"[OK] Filtered detections: {labels}")

    labels = normalizer.normalize_detections(detections, threshold=0.5)
    assert labels == ["tomato"]
    print("[OK] Custom threshold applied")

    result = normalizer.build_image_result("photo-1.jpg", detections)
    assert result.labels == ("tomato", "basil", "bell pepper")
    assert result.image_ref == "photo-1.jpg"
    assert "basil" in result
    print("[OK] Image result built")


if __name__ == "__main__":
    try:
        test_denylist_rejection()
        test_rewrite_rules()
        test_canonical_labels_are_stable()
        test_truncation_and_blank_input()
        test_custom_rule_table()
        test_normalize_detections()
        print("\n[SUCCESS] All label normalizer tests passed!")
        sys.exit(0)

    except Exception as e:
        print(f"[ERROR] Label normalizer test failed with error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
