"""
Dinner domain mappers.
Handles transformation between ORM models and DTOs for dinners and weekly plans.
"""

import datetime as dt
from typing import Iterable

from domain.mappers.base import BaseMapper
from domain.models import Dinner
from domain.schemas.dinner_schemas import (
    DinnerRequest,
    DinnerResponse,
    WeeklyDinnerPlan,
    weekday_field,
)


class DinnerMapper(BaseMapper[Dinner, DinnerRequest, DinnerResponse]):
    """Mapper for single dinners."""

    model = Dinner
    response_schema = DinnerResponse


class WeeklyDinnerPlanMapper:
    """Mapper from the dinners of a date range to a WeeklyDinnerPlan."""

    @staticmethod
    def to_dto(
        dinners: Iterable[Dinner], start_date: dt.date, end_date: dt.date
    ) -> WeeklyDinnerPlan:
        """
        Place every dinner's name in the slot of its weekday.

        Dinners outside [start_date, end_date] are ignored. When several dinners
        share a date the one with the highest id is kept.

        Args:
            dinners: Dinner ORM instances of a single user
            start_date: First day of the plan
            end_date: Last day of the plan (inclusive)

        Returns:
            WeeklyDinnerPlan with unfilled weekdays left as None
        """
        slots = {}
        for dinner in sorted(dinners, key=lambda d: (d.date, d.id or 0)):
            if start_date <= dinner.date <= end_date:
                slots[weekday_field(dinner.date)] = dinner.name

        return WeeklyDinnerPlan(start_date=start_date, end_date=end_date, **slots)
