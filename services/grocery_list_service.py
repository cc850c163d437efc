"""
Grocery List Service - form validation and local list operations.

This service holds the rules the UI applies before anything is sent to
the store:
- Name and quantity validation for new items
- The more lenient validation used by the edit dialog
- Index-preserving list edits used for optimistic updates

It has no Streamlit or network dependencies.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from models.entities import Category, GroceryItem

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

NAME_ERROR = f"Must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
QUANTITY_ERROR = "Must be greater than 0"

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class ItemFormResult:
    """Outcome of validating the new item form."""
    name: str = ""
    quantity: int = 0
    errors: dict[str, str] = field(default_factory=dict)  # {field: message}

    @property
    def is_valid(self) -> bool:
        return not self.errors


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer from user input, None if it is not one."""
    if value is None:
        return None
    value = value.strip()
    if not INTEGER_PATTERN.fullmatch(value):
        return None
    return int(value)


class GroceryListService:
    """Service for grocery item validation and list manipulation."""

    # ==========================================
    # Validation
    # ==========================================

    def validate_name(self, name: Optional[str]) -> Optional[str]:
        """Return an error message for an invalid name, None if valid."""
        if not name:
            return NAME_ERROR
        length = len(name.strip())
        if length < NAME_MIN_LENGTH or length > NAME_MAX_LENGTH:
            return NAME_ERROR
        return None

    def validate_quantity(self, quantity_text: Optional[str]) -> Optional[str]:
        """Return an error message for an invalid quantity, None if valid."""
        quantity = parse_int(quantity_text)
        if quantity is None or quantity <= 0:
            return QUANTITY_ERROR
        return None

    def validate_new_item(self, name: Optional[str], quantity_text: Optional[str]) -> ItemFormResult:
        """
        Validate the new item form.

        Returns:
            ItemFormResult with the trimmed name and parsed quantity,
            or per-field errors
        """
        errors = {}

        name_error = self.validate_name(name)
        if name_error:
            errors["name"] = name_error

        quantity_error = self.validate_quantity(quantity_text)
        if quantity_error:
            errors["quantity"] = quantity_error

        if errors:
            return ItemFormResult(errors=errors)

        return ItemFormResult(
            name=name.strip(),
            quantity=parse_int(quantity_text),
        )

    def validate_edit(
        self,
        item: GroceryItem,
        name: Optional[str],
        quantity_text: Optional[str],
        category: Category,
    ) -> Optional[GroceryItem]:
        """
        Apply the edit dialog's input to an item.

        An unparsable quantity keeps the item's current quantity.
        Returns None when the name is empty or the quantity is not positive.
        """
        new_name = (name or "").strip()
        new_quantity = parse_int(quantity_text)
        if new_quantity is None:
            new_quantity = item.quantity

        if not new_name or new_quantity <= 0:
            return None

        return item.with_changes(new_name, new_quantity, category)

    # ==========================================
    # Local list operations
    # ==========================================

    def index_of(self, items: list[GroceryItem], item_id: str) -> int:
        """Position of the item with this id, -1 if absent."""
        for index, item in enumerate(items):
            if item.id == item_id:
                return index
        return -1

    def remove_item(self, items: list[GroceryItem], item_id: str) -> tuple[int, Optional[GroceryItem]]:
        """
        Remove an item in place.

        Returns:
            (index, item) of the removed entry, or (-1, None) if not found
        """
        index = self.index_of(items, item_id)
        if index < 0:
            return -1, None
        return index, items.pop(index)

    def reinsert_item(self, items: list[GroceryItem], index: int, item: GroceryItem) -> None:
        """Put a removed item back at its previous position."""
        index = max(0, min(index, len(items)))
        items.insert(index, item)

    def replace_item(self, items: list[GroceryItem], updated: GroceryItem) -> Optional[GroceryItem]:
        """
        Replace the item with the same id in place.

        Returns:
            The previous item, or None if no item has that id
        """
        index = self.index_of(items, updated.id)
        if index < 0:
            return None
        previous = items[index]
        items[index] = updated
        return previous
