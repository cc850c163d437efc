"""
Edit item dialog.

A modal pre-filled with the item's name, quantity and category. Save is
ignored (the dialog stays open) until the input is valid.
"""

import streamlit as st
from typing import Callable

from models import GroceryItem
from views.components.category_select import render_category_select


@st.dialog("Edit Item")
def render_edit_item_dialog(
    item: GroceryItem,
    on_save: Callable[[str, str, str, str], object],
):
    """
    Render the edit dialog for an item.

    Args:
        item: Item being edited
        on_save: Callback (item_id, name, quantity_text, category_title),
            returns a result with .success and .error
    """
    name = st.text_input("Name", value=item.name, key=f"edit_name_{item.id}")
    quantity = st.text_input(
        "Quantity",
        value=str(item.quantity),
        key=f"edit_quantity_{item.id}",
    )
    category = render_category_select(
        key=f"edit_category_{item.id}",
        selected=item.category,
    )

    col_cancel, col_save = st.columns(2)

    with col_cancel:
        if st.button("Cancel", use_container_width=True):
            st.rerun()

    with col_save:
        if st.button("Save", type="primary", use_container_width=True):
            result = on_save(item.id, name, quantity, category.title)
            if result.success:
                st.rerun()
            else:
                st.error(result.error)
