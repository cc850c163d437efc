"""
Repositories - Data access layer for remote store operations.
"""

from models.repositories.grocery_item_repository import GroceryItemRepository, GroceryDataError

__all__ = ["GroceryItemRepository", "GroceryDataError"]
