"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.dinner_schemas import (
    DinnerRequest,
    DinnerResponse,
    WeeklyDinnerPlan,
    WeeklyPlanRegistered,
)
from domain.schemas.todo_schemas import ToDoRequest, ToDoResponse
from domain.schemas.event_schemas import (
    EventRequest,
    EventResponse,
    InviteRequest,
    InviteResponse,
)
from domain.schemas.shopping_schemas import ShoppingListRequest, ShoppingListResponse

__all__ = [
    # Dinner schemas
    "DinnerRequest",
    "DinnerResponse",
    "WeeklyDinnerPlan",
    "WeeklyPlanRegistered",
    # ToDo schemas
    "ToDoRequest",
    "ToDoResponse",
    # Event schemas
    "EventRequest",
    "EventResponse",
    "InviteRequest",
    "InviteResponse",
    # Shopping schemas
    "ShoppingListRequest",
    "ShoppingListResponse",
]
