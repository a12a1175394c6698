"""Shopping list service"""

from sqlalchemy.orm import Session

from domain.mappers import ShoppingListMapper
from domain.models import ShoppingList
from domain.schemas.shopping_schemas import ShoppingListRequest, ShoppingListResponse
from repositories import ShoppingListRepository
from services.base_service import OwnedResourceService


class ShoppingListService(
    OwnedResourceService[ShoppingList, ShoppingListRequest, ShoppingListResponse]
):
    """Business logic for shopping lists."""

    resource_name = "shopping list"

    def __init__(self, db: Session):
        super().__init__(
            db,
            ShoppingListRepository(db),
            ShoppingListMapper(),
            logger_name="planit.shopping",
        )
