"""
End-to-end scenarios composed from page objects.
"""

from .shopping_journey import ShoppingJourney

__all__ = [
    "ShoppingJourney",
]
