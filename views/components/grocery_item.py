"""
Grocery item components.

Provides the list row (color swatch, name, quantity, actions) and the
empty/error placeholders used by the grocery list view.
"""

import re
import streamlit as st
from typing import Callable

from models import GroceryItem

MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|~<>$])")


def escape_markdown(text: str) -> str:
    """Backslash-escape characters Markdown would interpret."""
    return MARKDOWN_SPECIAL.sub(r"\\\1", text)


def render_color_swatch(color: str, size: int = 24):
    """Render a solid square in the category color."""
    st.markdown(
        f'<div style="width:{size}px;height:{size}px;background-color:{color};'
        f'border-radius:2px;margin-top:6px"></div>',
        unsafe_allow_html=True,
    )


def render_grocery_item_row(
    item: GroceryItem,
    on_edit: Callable[[GroceryItem], None],
    on_delete: Callable[[str], None],
):
    """
    Render a single grocery item row.

    Args:
        item: The item to display
        on_edit: Callback to open the edit dialog for the item
        on_delete: Callback to delete the item by id
    """
    col_color, col_name, col_qty, col_edit, col_delete = st.columns(
        [0.5, 5, 1, 0.6, 0.6]
    )

    with col_color:
        render_color_swatch(item.category.color)

    with col_name:
        st.markdown(f"**{escape_markdown(item.name)}**")
        st.caption(item.category.title)

    with col_qty:
        st.markdown(str(item.quantity))

    with col_edit:
        if st.button("✏️", key=f"edit_{item.id}", help="Edit item"):
            on_edit(item)

    with col_delete:
        if st.button("🗑️", key=f"delete_{item.id}", help="Delete item"):
            on_delete(item.id)
            st.rerun()


def render_grocery_items(
    items: list[GroceryItem],
    on_edit: Callable[[GroceryItem], None],
    on_delete: Callable[[str], None],
):
    """Render every item in list order."""
    for item in items:
        render_grocery_item_row(item, on_edit=on_edit, on_delete=on_delete)


def render_empty_list():
    """Placeholder shown when the list has no items."""
    st.info("List is empty. Add some items!")


def render_load_error(message: str):
    """Error text that replaces the list when loading failed."""
    st.markdown(
        f'<p style="color:red;text-align:center">{message}</p>',
        unsafe_allow_html=True,
    )
