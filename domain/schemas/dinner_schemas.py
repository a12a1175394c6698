"""Pydantic schemas for dinners and weekly dinner plans."""

import datetime as dt
from typing import Iterator, List, Optional

from pydantic import BaseModel, Field, model_validator

# Weekday slot names indexed by date.weekday() (Monday == 0)
WEEKDAY_FIELDS = (
    "monday_dinner",
    "tuesday_dinner",
    "wednesday_dinner",
    "thursday_dinner",
    "friday_dinner",
    "saturday_dinner",
    "sunday_dinner",
)


def weekday_field(day: dt.date) -> str:
    """Name of the WeeklyDinnerPlan slot that holds the dinner for ``day``."""
    return WEEKDAY_FIELDS[day.weekday()]


class DinnerRequest(BaseModel):
    """Request body for creating or updating a dinner."""

    name: str = Field(..., min_length=1, max_length=100, description="Dinner name")
    date: dt.date = Field(..., description="Date the dinner is planned for")


class DinnerResponse(BaseModel):
    id: int
    user_id: int
    name: str
    date: dt.date

    model_config = {"from_attributes": True}


class WeeklyDinnerPlan(BaseModel):
    """
    One dinner name per weekday for the dates between start_date and end_date.

    end_date defaults to six days after start_date.
    """

    start_date: dt.date
    end_date: Optional[dt.date] = None
    monday_dinner: Optional[str] = Field(None, max_length=100)
    tuesday_dinner: Optional[str] = Field(None, max_length=100)
    wednesday_dinner: Optional[str] = Field(None, max_length=100)
    thursday_dinner: Optional[str] = Field(None, max_length=100)
    friday_dinner: Optional[str] = Field(None, max_length=100)
    saturday_dinner: Optional[str] = Field(None, max_length=100)
    sunday_dinner: Optional[str] = Field(None, max_length=100)

    @model_validator(mode="after")
    def _default_end_date(self) -> "WeeklyDinnerPlan":
        if self.end_date is None:
            self.end_date = self.start_date + dt.timedelta(days=6)
        return self

    def dates(self) -> Iterator[dt.date]:
        """Every date from start_date to end_date, inclusive."""
        day = self.start_date
        while day <= self.end_date:
            yield day
            day += dt.timedelta(days=1)

    def to_dinner_requests(self) -> List[DinnerRequest]:
        """Expand the plan into one DinnerRequest per date with a named dinner."""
        requests = []
        for day in self.dates():
            name = getattr(self, weekday_field(day))
            if name and name.strip():
                requests.append(DinnerRequest(name=name.strip(), date=day))
        return requests


class WeeklyPlanRegistered(BaseModel):
    registered: bool
    dinners: int
