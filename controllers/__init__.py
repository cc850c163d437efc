"""
Controllers layer - orchestration and session state management.
"""

from controllers.grocery_controller import GroceryController, SaveResult

__all__ = ["GroceryController", "SaveResult"]
