"""
Dinner Repository - Data access layer for dinners and weekly dinner plans
"""

import datetime as dt
import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Dinner

logger = logging.getLogger("planit.repositories.dinner")


class DinnerRepository(BaseRepository[Dinner]):
    """Repository for dinner data access"""

    def __init__(self, db: Session):
        super().__init__(db, Dinner)

    def get_by_date_range_and_user(
        self, user_id: int, start_date: dt.date, end_date: dt.date
    ) -> List[Dinner]:
        """Get a user's dinners between two dates (inclusive)"""
        return (
            self.db.query(Dinner)
            .filter(
                Dinner.user_id == user_id,
                Dinner.date >= start_date,
                Dinner.date <= end_date,
            )
            .order_by(Dinner.date, Dinner.id)
            .all()
        )

    def get_by_user_and_date(self, user_id: int, day: dt.date) -> Optional[Dinner]:
        """Get the most recently created dinner of a user on a date"""
        return (
            self.db.query(Dinner)
            .filter(Dinner.user_id == user_id, Dinner.date == day)
            .order_by(Dinner.id.desc())
            .first()
        )

    def add_weekly_dinners(self, dinners: List[Dinner]) -> bool:
        """
        Store a week of dinners in one transaction.

        A dinner on a date where the user already has one renames the
        existing dinner instead of adding a second one.

        Returns:
            True if every dinner was stored, False if the transaction was rolled back
        """
        try:
            for dinner in dinners:
                existing = self.get_by_user_and_date(dinner.user_id, dinner.date)
                if existing:
                    existing.name = dinner.name
                else:
                    self.db.add(dinner)
            self.db.commit()
            return True
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to store weekly dinner plan")
            return False
