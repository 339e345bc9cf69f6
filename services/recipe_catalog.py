"""
Built-in recipe catalog for SnapCook application.

Quick weeknight recipes used as ranking candidates. Catalog order is the
tie-break order when two recipes score the same.
"""

from typing import Tuple

from models import RecipeDefinition


RECIPE_CATALOG: Tuple[RecipeDefinition, ...] = (
    RecipeDefinition(
        id='caprese', title='Quick Caprese Salad', minutes=10,
        ingredients=('Tomato', 'Mozzarella', 'Basil', 'Olive Oil', 'Salt', 'Pepper'),
        steps=('Slice tomatoes & mozzarella.', 'Layer with basil.', 'Drizzle olive oil; season.'),
    ),
    RecipeDefinition(
        id='margherita', title='Margherita Flatbread', minutes=18,
        ingredients=('Flatbread', 'Tomato', 'Mozzarella', 'Basil', 'Olive Oil', 'Garlic'),
        steps=('Heat oven 450°F.', 'Oil+garlic flatbread.', 'Top with tomato+mozzarella; bake 8–10m.',
               'Finish with basil.'),
    ),
    RecipeDefinition(
        id='omelet', title='Tomato Basil Omelet', minutes=12,
        ingredients=('Eggs', 'Tomato', 'Mozzarella', 'Basil', 'Butter', 'Salt'),
        steps=('Beat eggs.', 'Cook until almost set.', 'Add fillings; fold.'),
    ),
    RecipeDefinition(
        id='lemon-chicken', title='Garlic Lemon Chicken Skillet', minutes=22,
        ingredients=('Chicken Breast', 'Garlic', 'Lemon', 'Olive Oil', 'Salt', 'Pepper'),
        steps=('Sear chicken 4–5m/side.', 'Add garlic 30s.', 'Add lemon; simmer.'),
    ),
    RecipeDefinition(
        id='stirfry', title='Weeknight Veggie Stir-Fry', minutes=16,
        ingredients=('Broccoli', 'Carrot', 'Bell Pepper', 'Soy Sauce', 'Garlic', 'Ginger', 'Rice'),
        steps=('Stir-fry veg.', 'Add garlic+ginger.', 'Add soy; toss; serve with rice.'),
    ),
    RecipeDefinition(
        id='garlic-broccoli-pasta', title='Garlic Broccoli Pasta', minutes=20,
        ingredients=('Pasta', 'Broccoli', 'Garlic', 'Olive Oil', 'Parmesan (optional)'),
        steps=('Boil pasta.', 'Sauté broccoli+garlic.', 'Toss with oil+pasta water; finish.'),
    ),
    RecipeDefinition(
        id='rice-bowl', title='15-Min Rice & Egg Bowl', minutes=15,
        ingredients=('Rice', 'Eggs', 'Soy Sauce', 'Scallion (optional)'),
        steps=('Cook/heat rice.', 'Fry/soft-scramble eggs.', 'Top rice with eggs+soy.'),
    ),
    RecipeDefinition(
        id='beans-on-toast', title='Smoky Beans on Toast', minutes=12,
        ingredients=('Bread', 'Canned Beans', 'Tomato Paste (or salsa)', 'Olive Oil', 'Garlic', 'Paprika'),
        steps=('Warm beans with tomato/garlic/paprika.', 'Serve on toast.'),
    ),
    RecipeDefinition(
        id='tuna-pasta', title='Pantry Tuna Pasta', minutes=17,
        ingredients=('Pasta', 'Canned Tuna', 'Olive Oil', 'Garlic', 'Lemon', 'Parsley (optional)'),
        steps=('Boil pasta.', 'Sauté garlic in oil.', 'Add tuna+lemon; toss with pasta.'),
    ),
    RecipeDefinition(
        id='quick-soup', title='Quick Veg Soup', minutes=20,
        ingredients=('Broth', 'Carrot', 'Onion', 'Celery', 'Pasta or Rice', 'Salt', 'Pepper'),
        steps=('Sauté aromatics.', 'Add broth+starch; simmer.'),
    ),
    RecipeDefinition(
        id='curry-chickpea', title='Fast Chickpea Curry', minutes=18,
        ingredients=('Canned Chickpeas', 'Coconut Milk', 'Curry Powder', 'Garlic', 'Rice'),
        steps=('Sauté curry+garlic.', 'Add chickpeas+coconut milk; simmer 10m.', 'Serve with rice.'),
    ),
)


def get_recipe_catalog() -> Tuple[RecipeDefinition, ...]:
    """Get the built-in recipe catalog"""
    return RECIPE_CATALOG
