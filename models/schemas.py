"""
Pydantic schemas for the records stored in Firebase.

Each item is stored under a push key in the shopping-list collection:

    {
        "-NxAbc123": {"name": "Milk", "quantity": 2, "category": "Dairy"},
        ...
    }

The category is stored by title and resolved back to a Category on load.
"""

from pydantic import BaseModel, ConfigDict, Field


class GroceryItemRecord(BaseModel):
    """JSON body for a single grocery item."""
    model_config = ConfigDict(strict=True)

    name: str = Field(..., description="Display name of the item")
    quantity: int = Field(..., description="Number of pieces")
    category: str = Field(..., description="Category title (e.g., 'Dairy')")


class PushResponse(BaseModel):
    """
    Response body of a Firebase POST.

    Firebase returns the generated child key in a field called "name".
    """
    name: str
