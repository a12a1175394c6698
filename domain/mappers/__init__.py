"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.base import BaseMapper
from domain.mappers.dinner_mapper import DinnerMapper, WeeklyDinnerPlanMapper
from domain.mappers.todo_mapper import ToDoMapper
from domain.mappers.event_mapper import EventMapper, InviteMapper
from domain.mappers.shopping_mapper import ShoppingListMapper

__all__ = [
    "BaseMapper",
    "DinnerMapper",
    "WeeklyDinnerPlanMapper",
    "ToDoMapper",
    "EventMapper",
    "InviteMapper",
    "ShoppingListMapper",
]
