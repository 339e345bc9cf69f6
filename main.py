#!/usr/bin/env python3
"""
SnapCook - Main Application Entry Point

Turns the objects recognized in your photos into a pantry list and
ranks quick recipes you can cook with it.
"""

import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from ui import create_pantry_manager_interface
from utils import get_config, setup_logging


def main():
    """Main application entry point"""
    st.set_page_config(
        page_title="SnapCook",
        page_icon="📸",
        layout="centered"
    )

    if "logging_ready" not in st.session_state:
        setup_logging()
        st.session_state.logging_ready = True

    pantry_ui = create_pantry_manager_interface()
    pantry_ui.render_pantry_manager()

    config = get_config()
    if config.debug_mode:
        with st.sidebar:
            st.markdown("### ⚙️ Settings")
            st.write(f"Confidence threshold: {config.confidence_threshold}")
            st.write(f"Quick recipe bonus: {config.quick_recipe_bonus} (≤ {config.quick_recipe_minutes} min)")
            st.write(f"Recipe limit: {config.recipe_limit}")


if __name__ == "__main__":
    main()
