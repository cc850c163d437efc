"""
Category picker component.
"""

import streamlit as st
from typing import Optional

from models import Category, all_categories, default_category


def render_category_select(
    key: str,
    selected: Optional[Category] = None,
    label: str = "Category",
) -> Category:
    """
    Render a selectbox of all categories.

    Args:
        key: Widget key
        selected: Category to preselect (defaults to the first category)
        label: Field label

    Returns:
        The selected Category
    """
    options = all_categories()
    current = selected or default_category()

    return st.selectbox(
        label,
        options,
        index=options.index(current),
        format_func=lambda c: c.title,
        key=key,
    )
