"""
Shopping list domain mappers.
Handles transformation between ORM models and DTOs for shopping lists.
"""

from domain.mappers.base import BaseMapper
from domain.models import ShoppingList
from domain.schemas.shopping_schemas import ShoppingListRequest, ShoppingListResponse


class ShoppingListMapper(
    BaseMapper[ShoppingList, ShoppingListRequest, ShoppingListResponse]
):
    """Mapper for shopping list transformations."""

    model = ShoppingList
    response_schema = ShoppingListResponse
