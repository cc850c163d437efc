"""
Fixed set of item categories.

The order here is the order shown in category pickers; the first entry
is the default for new items.
"""

from enum import Enum

from models.entities import Category


class CategoryNotFoundError(ValueError):
    """Raised when a stored category title has no matching Category."""


class Categories(Enum):
    VEGETABLES = Category("Vegetables", "#00FF80")
    FRUIT = Category("Fruit", "#91FF00")
    MEAT = Category("Meat", "#FF6600")
    DAIRY = Category("Dairy", "#00D0FF")
    CARBS = Category("Carbs", "#003CFF")
    SWEETS = Category("Sweets", "#FF9500")
    SPICES = Category("Spices", "#FFBB00")
    CONVENIENCE = Category("Convenience", "#BF00FF")
    HYGIENE = Category("Hygiene", "#9500FF")
    OTHER = Category("Other", "#00E1FF")


def all_categories() -> list[Category]:
    """All categories in display order."""
    return [c.value for c in Categories]


def default_category() -> Category:
    """Category preselected on the new item form."""
    return all_categories()[0]


def get_category_by_title(title: str) -> Category:
    """
    Look up a category by its title.

    Raises:
        CategoryNotFoundError: if no category has this title
    """
    for category in all_categories():
        if category.title == title:
            return category
    raise CategoryNotFoundError(f"Unknown category: {title!r}")
