"""
Pantry manager UI for SnapCook application.

Main user interface: add classifier results for each photo, review and edit
the detected pantry, and find meal ideas ranked against it.
"""

import json
from typing import Any, List, Optional, Tuple

import pandas as pd
import streamlit as st

from models import RawDetection, ScoredRecipe
from services import PantrySession, format_pantry_chip
from utils import get_logger

logger = get_logger(__name__)


def parse_prediction_file(raw: bytes) -> List[RawDetection]:
    """
    Parse one uploaded classifier result file.

    The file holds the predictions for a single photo, either as a JSON list
    or as an object with a "predictions" list. Each prediction uses
    label/confidence or className/probability keys.
    """
    payload: Any = json.loads(raw.decode('utf-8'))
    if isinstance(payload, dict):
        payload = payload.get('predictions', [])
    if not isinstance(payload, list):
        raise ValueError("Expected a list of predictions")
    if not all(isinstance(item, dict) for item in payload):
        raise ValueError("Each prediction must be an object")
    return [RawDetection.from_dict(item) for item in payload]


def build_pantry_frame(rows: List[Tuple[str, int]]) -> pd.DataFrame:
    """Pantry rows as a two-column table"""
    return pd.DataFrame(rows, columns=['Ingredient', 'Count'])


def build_recipe_frame(recipes: List[ScoredRecipe]) -> pd.DataFrame:
    """Meal ideas as a table, best match first"""
    return pd.DataFrame(
        [recipe.to_display_row() for recipe in recipes],
        columns=['Recipe', 'Minutes', 'Ingredients', 'Steps', 'Score']
    )


class PantryManagerInterface:
    """
    Pantry management interface - the heart of the application.

    Provides:
    - Classifier results intake, one file per photo
    - Pantry review with remove/add/undo edits
    - Meal ideas ranked against the pantry
    """

    SESSION_KEY = "pantry_session"
    NEW_ITEM_KEY = "new_pantry_item"

    def __init__(self, session: Optional[PantrySession] = None):
        self._session = session

    @property
    def session(self) -> PantrySession:
        if self._session is not None:
            return self._session
        if self.SESSION_KEY not in st.session_state:
            st.session_state[self.SESSION_KEY] = PantrySession()
        return st.session_state[self.SESSION_KEY]

    def add_uploaded_files(self, uploads) -> Tuple[int, int]:
        """
        Record one detection result per uploaded file.

        Returns:
            (processed, failed) counts
        """
        failed = 0
        for upload in uploads:
            try:
                detections = parse_prediction_file(upload.getvalue())
            except (ValueError, UnicodeDecodeError) as e:
                logger.error(f"Could not read detections from {upload.name}: {e}")
                self.session.record_failed_image(upload.name)
                failed += 1
                continue
            self.session.record_detections(upload.name, detections)
        return len(uploads), failed

    def render_pantry_manager(self):
        """Render the complete pantry interface"""
        st.title("📸 SnapCook: AI Ingredient Detection")

        self._render_detection_upload()

        if self.session.photos:
            self._render_pantry()
            self._render_actions()

        if self.session.recommendations:
            self._render_recipe_ideas()

    def _render_detection_upload(self):
        """Render classifier results intake"""
        st.markdown("### 🖼️ Add Photos")
        st.caption("Upload the classifier output for each photo (one JSON file per photo)")

        with st.form("detection_upload", clear_on_submit=True):
            uploads = st.file_uploader(
                "Classifier results",
                type=["json"],
                accept_multiple_files=True
            )
            submitted = st.form_submit_button("Add Detections")

        if submitted and uploads:
            processed, failed = self.add_uploaded_files(uploads)
            if failed:
                st.warning(f"{failed} of {processed} files could not be read and were skipped.")
            else:
                st.success(f"Added detections from {processed} photo(s).")

        if self.session.photos:
            st.caption("Photos: " + ", ".join(self.session.photos))

    def _render_pantry(self):
        """Render the pantry chips with edit controls"""
        st.markdown("### 🥕 Your ingredients (tap ✕ to remove)")

        rows = self.session.pantry_rows()
        if not rows:
            st.write("No ingredients yet.")
        else:
            cols_per_row = 4
            for i in range(0, len(rows), cols_per_row):
                cols = st.columns(cols_per_row)
                for col, (label, count) in zip(cols, rows[i:i + cols_per_row]):
                    with col:
                        if st.button(f"{format_pantry_chip(label, count)} ✕", key=f"remove_{label}"):
                            self.session.remove_label(label)
                            st.rerun()

            with st.expander("Pantry table", expanded=False):
                st.dataframe(build_pantry_frame(rows), use_container_width=True, hide_index=True)

        add_col, button_col = st.columns([4, 1])
        with add_col:
            st.text_input(
                "Add missing",
                key=self.NEW_ITEM_KEY,
                placeholder="Add missing (e.g., chicken, pasta, beans)",
                label_visibility="collapsed"
            )
        with button_col:
            st.button("Add", on_click=self._add_new_item)

        if self.session.has_edits():
            if st.button("↩️ Undo edits"):
                self.session.undo_edits()
                st.rerun()

    def _add_new_item(self):
        """Add the typed item and clear the input"""
        if self.session.add_label(st.session_state.get(self.NEW_ITEM_KEY, "")):
            st.session_state[self.NEW_ITEM_KEY] = ""

    def _render_actions(self):
        col1, col2 = st.columns(2)
        with col1:
            if st.button("🍽️ Find Meal Ideas", use_container_width=True):
                self.session.find_recipes()
        with col2:
            if st.button("🗑️ Clear All", use_container_width=True):
                self.session.clear_all()
                st.rerun()

    def _render_recipe_ideas(self):
        """Render ranked recipe cards"""
        st.markdown("### 🍳 Recipe ideas (based on your list)")

        for recipe in self.session.recommendations:
            with st.container(border=True):
                st.markdown(f"**{recipe.title}**")
                st.caption(f"{recipe.minutes} min")
                st.markdown(f"**Ingredients:** {recipe.ingredients_text}")
                st.markdown(f"**Steps:** {recipe.steps_text}")

        with st.expander("Match scores", expanded=False):
            frame = build_recipe_frame(self.session.recommendations)
            st.dataframe(frame[['Recipe', 'Minutes', 'Score']], use_container_width=True, hide_index=True)


def create_pantry_manager_interface(session: Optional[PantrySession] = None) -> PantryManagerInterface:
    """Factory function to create pantry manager interface"""
    return PantryManagerInterface(session)
