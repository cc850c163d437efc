"""
Grocery Controller - manages the grocery list state and interactions.

This controller handles:
- Loading items from Firebase on first render
- Adding items from the new item form
- Editing items (optimistic update, then PATCH)
- Deleting items (optimistic removal, reinserted if the DELETE fails)

All list state lives in st.session_state.grocery so it survives reruns.
"""

import logging
import streamlit as st
from typing import Optional
from dataclasses import dataclass, field

from models import GroceryItem, get_category_by_title
from models.repositories import GroceryItemRepository, GroceryDataError
from services.document_store import DocumentStoreBase, DocumentStoreError, DocumentStoreHTTPError, FirebaseRealtimeDB
from services.grocery_list_service import GroceryListService

logger = logging.getLogger(__name__)

LOAD_FAILED_ERROR = "Failed to load items. Please try again later."
GENERIC_ERROR = "Something went wrong. Please try again later."
SAVE_FAILED_ERROR = "Could not save the item. Please try again later."
UPDATE_FAILED_NOTICE = "Changes could not be saved to the server."
DELETE_FAILED_NOTICE = "Could not delete the item. It has been restored."


@dataclass
class SaveResult:
    """Result of a create or update attempt."""
    success: bool
    item: Optional[GroceryItem] = None
    errors: dict[str, str] = field(default_factory=dict)  # {field: message}
    error: Optional[str] = None


class GroceryController:
    """Controller for grocery list management."""

    def __init__(self, store: Optional[DocumentStoreBase] = None):
        self.repo = GroceryItemRepository(store or FirebaseRealtimeDB())
        self.service = GroceryListService()
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "grocery" not in st.session_state:
            st.session_state.grocery = {
                "items": [],
                "is_loading": True,
                "error": None,
                "loaded": False,
                "notice": None,  # One-shot message shown after a rerun
            }

    @property
    def _state(self) -> dict:
        return st.session_state.grocery

    # ==========================================
    # Session State
    # ==========================================

    def get_items(self) -> list[GroceryItem]:
        """Get the current list of items."""
        return self._state["items"]

    def get_item(self, item_id: str) -> Optional[GroceryItem]:
        """Get a single item by id."""
        index = self.service.index_of(self._state["items"], item_id)
        if index < 0:
            return None
        return self._state["items"][index]

    def is_loading(self) -> bool:
        return self._state["is_loading"]

    def get_error(self) -> Optional[str]:
        """Get the load error, if the last load failed."""
        return self._state["error"]

    def pop_notice(self) -> Optional[str]:
        """Return and clear the pending notice."""
        notice = self._state["notice"]
        self._state["notice"] = None
        return notice

    # ==========================================
    # Loading
    # ==========================================

    def ensure_loaded(self):
        """Load items once per session."""
        if not self._state["loaded"]:
            self.load_items()

    def load_items(self):
        """
        Load all items from the store into session state.

        On failure the error message replaces the list and loading stops
        being reported; the previous items are left as they were.
        """
        self._state["loaded"] = True
        try:
            items = self.repo.get_all()
        except DocumentStoreHTTPError as e:
            logger.error(f"Loading items failed: HTTP {e.status_code}")
            self._state["error"] = LOAD_FAILED_ERROR
            self._state["is_loading"] = False
            return
        except (DocumentStoreError, GroceryDataError) as e:
            logger.error(f"Loading items failed: {e}")
            self._state["error"] = GENERIC_ERROR
            self._state["is_loading"] = False
            return

        self._state["items"] = items
        self._state["error"] = None
        self._state["is_loading"] = False
        logger.info(f"Loaded {len(items)} grocery items")

    def refresh(self):
        """Reload the list from the store."""
        self._state["is_loading"] = True
        self._state["loaded"] = False
        self.load_items()

    # ==========================================
    # Item Operations
    # ==========================================

    def create_item(self, name: str, quantity_text: str, category_title: str) -> SaveResult:
        """
        Validate and store a new item, then append it to the local list.

        Args:
            name: Name as typed by the user
            quantity_text: Quantity as typed by the user
            category_title: Title of the selected category

        Returns:
            SaveResult with the created item, field errors, or a save error
        """
        form = self.service.validate_new_item(name, quantity_text)
        if not form.is_valid:
            return SaveResult(success=False, errors=form.errors)

        category = get_category_by_title(category_title)

        try:
            item = self.repo.create(form.name, form.quantity, category)
        except DocumentStoreError as e:
            logger.error(f"Creating item failed: {e}")
            return SaveResult(success=False, error=SAVE_FAILED_ERROR)

        self._state["items"].append(item)
        return SaveResult(success=True, item=item)

    def update_item(
        self,
        item_id: str,
        name: str,
        quantity_text: str,
        category_title: str,
    ) -> SaveResult:
        """
        Apply an edit locally, then send it to the store.

        A failed PATCH keeps the local edit and leaves a notice for the view.
        """
        item = self.get_item(item_id)
        if not item:
            return SaveResult(success=False, error="Item not found")

        category = get_category_by_title(category_title)
        updated = self.service.validate_edit(item, name, quantity_text, category)
        if not updated:
            return SaveResult(success=False, error="Enter a name and a quantity greater than 0")

        self.service.replace_item(self._state["items"], updated)

        try:
            self.repo.update(updated)
        except DocumentStoreError as e:
            logger.warning(f"Updating item {item_id} failed: {e}")
            self._state["notice"] = UPDATE_FAILED_NOTICE

        return SaveResult(success=True, item=updated)

    def remove_item(self, item_id: str) -> bool:
        """
        Remove an item locally and delete it from the store.

        If the delete fails the item is put back at its previous index.

        Returns:
            True if the item was deleted remotely
        """
        index, item = self.service.remove_item(self._state["items"], item_id)
        if item is None:
            return False

        try:
            self.repo.delete(item_id)
        except DocumentStoreError as e:
            logger.warning(f"Deleting item {item_id} failed, restoring: {e}")
            self.service.reinsert_item(self._state["items"], index, item)
            self._state["notice"] = DELETE_FAILED_NOTICE
            return False

        return True
