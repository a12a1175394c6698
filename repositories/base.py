"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

import logging
from typing import Any, Dict, Generic, TypeVar, Optional, List, Type
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")

logger = logging.getLogger("planit.repositories")

# Range of the Integer primary key columns
MAX_ID = 2**31 - 1
# Largest OFFSET the database accepts (signed 64-bit)
MAX_OFFSET = 2**63 - 1


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations over a model with an
    integer ``id`` primary key and a ``user_id`` owner column.

    Mutations commit the session. When the database rejects a mutation the
    session is rolled back and failure is signalled with ``None``/``False``
    so the service layer decides how to report it.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Get entity by ID.

        Args:
            entity_id: Entity primary key

        Returns:
            Entity or None if not found
        """
        # No row can carry an id the column cannot store
        if not 1 <= entity_id <= MAX_ID:
            return None
        return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def get_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        """Get all entities with pagination"""
        return (
            self.db.query(self.model)
            .order_by(self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_by_user(self, user_id: int, skip: int = 0, limit: int = 100) -> List[ModelType]:
        """Get the entities owned by a user, oldest first"""
        return (
            self.db.query(self.model)
            .filter(self.model.user_id == user_id)
            .order_by(self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count_by_user(self, user_id: int) -> int:
        """Count the entities owned by a user"""
        return self.db.query(self.model).filter(self.model.user_id == user_id).count()

    def create(self, entity: ModelType) -> Optional[ModelType]:
        """Create new entity; None if the database rejected it"""
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
            return entity
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to create %s", self.model.__name__)
            return None

    def update(self, entity: ModelType, values: Dict[str, Any]) -> Optional[ModelType]:
        """Apply column values to an existing entity; None on failure"""
        try:
            for key, value in values.items():
                setattr(entity, key, value)
            self.db.commit()
            self.db.refresh(entity)
            return entity
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(
                "Failed to update %s %s", self.model.__name__, getattr(entity, "id", None)
            )
            return None

    def delete(self, entity: ModelType) -> bool:
        """Delete entity; False on failure"""
        try:
            self.db.delete(entity)
            self.db.commit()
            return True
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(
                "Failed to delete %s %s", self.model.__name__, getattr(entity, "id", None)
            )
            return False

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None
