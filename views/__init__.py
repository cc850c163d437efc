"""
Views layer - UI presentation components.
"""

from views.grocery_list_view import GroceryListView
from views.new_item_view import NewItemView

__all__ = ["GroceryListView", "NewItemView"]
