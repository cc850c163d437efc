"""
Grocery List View - UI for the shopping list.

This view handles:
- Showing a spinner until the first load finishes
- Showing the load error in place of the list
- Listing items with their category color and quantity
- Opening the edit dialog and deleting items
"""

import streamlit as st

from controllers.grocery_controller import GroceryController
from views.components.grocery_item import (
    render_grocery_items,
    render_empty_list,
    render_load_error,
)
from views.components.edit_item_dialog import render_edit_item_dialog

NEW_ITEM_PAGE = "pages/1_➕_New_Item.py"


class GroceryListView:
    """View for the grocery list UI."""

    def __init__(self):
        self.controller = GroceryController()

    def render(self):
        """Main render method."""
        self._render_header()

        notice = self.controller.pop_notice()
        if notice:
            st.toast(notice)

        if self.controller.is_loading():
            with st.spinner("Loading items..."):
                self.controller.ensure_loaded()

        self._render_content()

    def _render_header(self):
        """Render the title row with the add and refresh actions."""
        col_title, col_refresh, col_add = st.columns([6, 1, 1])

        with col_title:
            st.title("Grocery List")

        with col_refresh:
            if st.button("🔄", help="Reload from server", use_container_width=True):
                self.controller.refresh()
                st.rerun()

        with col_add:
            if st.button("➕", help="Add a new item", type="primary", use_container_width=True):
                st.switch_page(NEW_ITEM_PAGE)

    def _render_content(self):
        """Render the error, the empty placeholder or the items."""
        error = self.controller.get_error()
        if error:
            render_load_error(error)
            return

        items = self.controller.get_items()
        if not items:
            render_empty_list()
            return

        render_grocery_items(
            items,
            on_edit=self._open_edit_dialog,
            on_delete=self.controller.remove_item,
        )

    def _open_edit_dialog(self, item):
        render_edit_item_dialog(item, on_save=self.controller.update_item)
