"""
Models layer - domain entities, stored record schemas and repositories.
"""

from models.entities import Category, GroceryItem
from models.schemas import GroceryItemRecord, PushResponse
from models.categories import (
    Categories,
    CategoryNotFoundError,
    all_categories,
    default_category,
    get_category_by_title,
)

__all__ = [
    # Entities
    "Category",
    "GroceryItem",
    # Schemas
    "GroceryItemRecord",
    "PushResponse",
    # Categories
    "Categories",
    "CategoryNotFoundError",
    "all_categories",
    "default_category",
    "get_category_by_title",
]
