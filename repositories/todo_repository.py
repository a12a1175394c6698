"""
ToDo Repository - Data access layer for todo items
"""

from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import ToDo


class TodoRepository(BaseRepository[ToDo]):
    """Repository for todo data access"""

    def __init__(self, db: Session):
        super().__init__(db, ToDo)
