"""
UI components for SnapCook application.

Contains the Streamlit-based pantry and meal ideas interface.
"""

from .pantry_manager import (
    PantryManagerInterface,
    create_pantry_manager_interface,
    parse_prediction_file,
    build_pantry_frame,
    build_recipe_frame
)

__all__ = [
    'PantryManagerInterface',
    'create_pantry_manager_interface',
    'parse_prediction_file',
    'build_pantry_frame',
    'build_recipe_frame'
]
