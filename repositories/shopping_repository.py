"""
Shopping List Repository - Data access layer for shopping list operations
"""

from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import ShoppingList


class ShoppingListRepository(BaseRepository[ShoppingList]):
    """Repository for shopping list data access"""

    def __init__(self, db: Session):
        super().__init__(db, ShoppingList)

