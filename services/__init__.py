"""Services package - Business logic layer"""

from services.base_service import BaseService, OwnedResourceService
from services.dinner_service import DinnerService
from services.todo_service import TodoService
from services.event_service import EventService
from services.invite_service import InviteService
from services.shopping_service import ShoppingListService

__all__ = [
    "BaseService",
    "OwnedResourceService",
    "DinnerService",
    "TodoService",
    "EventService",
    "InviteService",
    "ShoppingListService",
]
