"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.dinner_repository import DinnerRepository
from repositories.todo_repository import TodoRepository
from repositories.event_repository import EventRepository, InviteRepository
from repositories.shopping_repository import ShoppingListRepository

__all__ = [
    "BaseRepository",
    "DinnerRepository",
    "TodoRepository",
    "EventRepository",
    "InviteRepository",
    "ShoppingListRepository",
]
