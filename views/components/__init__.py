"""
Reusable UI components.
"""

from views.components.grocery_item import (
    escape_markdown,
    render_color_swatch,
    render_grocery_item_row,
    render_grocery_items,
    render_empty_list,
    render_load_error,
)
from views.components.category_select import render_category_select
from views.components.edit_item_dialog import render_edit_item_dialog

__all__ = [
    # Grocery list
    "escape_markdown",
    "render_color_swatch",
    "render_grocery_item_row",
    "render_grocery_items",
    "render_empty_list",
    "render_load_error",
    # Forms
    "render_category_select",
    "render_edit_item_dialog",
]
