"""
Grocery Item Repository - Data access for grocery items.

This repository maps GroceryItem entities onto the flat shopping-list
collection of the document store. Each call is a single request; there
is no caching and no transaction across calls.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from config.settings import get_settings
from models.entities import Category, GroceryItem
from models.schemas import GroceryItemRecord
from models.categories import CategoryNotFoundError, get_category_by_title
from services.document_store import DocumentStoreBase

logger = logging.getLogger(__name__)


class GroceryDataError(ValueError):
    """A stored record could not be turned into a GroceryItem."""


class GroceryItemRepository:
    """Repository for grocery item operations."""

    def __init__(self, store: DocumentStoreBase, path: Optional[str] = None):
        """
        Initialize with a document store.

        Args:
            store: Store client used for every request
            path: Collection path; defaults to the configured shopping list path
        """
        self.store = store
        self.path = path or get_settings().shopping_list_path

    def get_all(self) -> list[GroceryItem]:
        """
        Load every item in the collection, in the order returned by the store.

        Raises:
            DocumentStoreError: on request failures
            GroceryDataError: if a record is malformed or names an unknown category
        """
        data = self.store.get_collection(self.path)

        items = []
        for key, value in data.items():
            items.append(self._to_item(key, value))
        return items

    def _to_item(self, key: str, value: object) -> GroceryItem:
        try:
            record = GroceryItemRecord.model_validate(value)
            category = get_category_by_title(record.category)
        except (ValidationError, CategoryNotFoundError) as e:
            logger.error(f"Invalid grocery record {key}: {e}")
            raise GroceryDataError(f"Invalid grocery record {key}") from e

        return GroceryItem.from_record(key, record, category)

    def create(self, name: str, quantity: int, category: Category) -> GroceryItem:
        """Store a new item and return it with its server-assigned key."""
        record = GroceryItemRecord(name=name, quantity=quantity, category=category.title)
        key = self.store.push(self.path, record.model_dump())

        return GroceryItem(id=key, name=name, quantity=quantity, category=category)

    def update(self, item: GroceryItem) -> None:
        """Overwrite name, quantity and category of a stored item."""
        self.store.update(self.path, item.id, item.to_record().model_dump())

    def delete(self, item_id: str) -> None:
        """Delete an item by key."""
        self.store.delete(self.path, item_id)
