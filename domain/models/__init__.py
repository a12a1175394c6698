"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.dinner import Dinner
from domain.models.todo import ToDo
from domain.models.event import Event, Invite
from domain.models.shopping_list import ShoppingList

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Planning models
    "Dinner",
    "ToDo",
    "Event",
    "Invite",
    "ShoppingList",
]
