"""
Grocery list domain entities.

These are plain dataclasses used throughout the controllers and views.
They are independent of the wire format; conversion to and from the JSON
records stored in Firebase lives on GroceryItem (see models.schemas).

Entity Relationships:
    GroceryItem (*) ──> (1) Category
"""

from dataclasses import dataclass, replace

from models.schemas import GroceryItemRecord


@dataclass(frozen=True)
class Category:
    """
    A named, colored classification tag for items.

    Categories are a fixed set (see models.categories). Items reference
    them by title when stored remotely.
    """
    title: str
    color: str  # CSS hex, e.g. "#00FF80"


@dataclass
class GroceryItem:
    """
    A shopping-list entry.

    The id is the key assigned by Firebase when the item is pushed,
    so an item only exists locally after a successful create.
    """
    id: str
    name: str
    quantity: int
    category: Category

    def to_record(self) -> GroceryItemRecord:
        """Build the JSON record sent on create/update."""
        return GroceryItemRecord(
            name=self.name,
            quantity=self.quantity,
            category=self.category.title,
        )

    @classmethod
    def from_record(cls, key: str, record: GroceryItemRecord, category: Category) -> "GroceryItem":
        """Rebuild an item from a stored record and its resolved category."""
        return cls(
            id=key,
            name=record.name,
            quantity=record.quantity,
            category=category,
        )

    def with_changes(self, name: str, quantity: int, category: Category) -> "GroceryItem":
        """Copy of this item with edited fields; the id is preserved."""
        return replace(self, name=name, quantity=quantity, category=category)
