"""Dinner planning service"""

import datetime as dt

from sqlalchemy.orm import Session

from app.exceptions import OperationFailedError, ServiceValidationError
from domain.mappers import DinnerMapper, WeeklyDinnerPlanMapper
from domain.models import Dinner
from domain.schemas.dinner_schemas import DinnerRequest, DinnerResponse, WeeklyDinnerPlan
from repositories import DinnerRepository
from services.base_service import OwnedResourceService

MAX_PLAN_DAYS = 7


class DinnerService(OwnedResourceService[Dinner, DinnerRequest, DinnerResponse]):
    """Business logic for dinners and weekly dinner plans."""

    resource_name = "dinner"

    def __init__(self, db: Session):
        super().__init__(
            db,
            DinnerRepository(db),
            DinnerMapper(),
            logger_name="planit.dinner",
        )
        self.weekly_mapper = WeeklyDinnerPlanMapper()

    @staticmethod
    def validate_plan_range(start_date: dt.date, end_date: dt.date) -> None:
        """
        Check that [start_date, end_date] is a valid plan range.

        Raises:
            ServiceValidationError: If end_date precedes start_date or the
                range covers more than seven days
        """
        if end_date < start_date:
            raise ServiceValidationError(
                "end_date must not be before start_date",
                details={"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
            )
        if (end_date - start_date).days >= MAX_PLAN_DAYS:
            raise ServiceValidationError(
                f"A weekly plan covers at most {MAX_PLAN_DAYS} days",
                details={"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
            )

    def register_weekly_plan(self, user_id: int, plan: WeeklyDinnerPlan) -> int:
        """
        Store one dinner per named weekday of a weekly plan.

        Args:
            user_id: Caller's user id (owner of the new dinners)
            plan: WeeklyDinnerPlan with at least one named weekday

        Returns:
            Number of dinners stored

        Raises:
            ServiceValidationError: If the range is invalid or no dinner is named
            OperationFailedError: If the repository could not store the plan
        """
        self.validate_plan_range(plan.start_date, plan.end_date)

        dinners = [
            Dinner(user_id=user_id, date=request.date, name=request.name)
            for request in plan.to_dinner_requests()
        ]
        if not dinners:
            raise ServiceValidationError("Weekly plan does not name any dinner")

        if not self.repository.add_weekly_dinners(dinners):
            self.log_creation_failure("weekly dinner plan")
            raise OperationFailedError.for_resource(
                "weekly dinner plan", user_id, "register"
            )

        self.log_operation_success("registered", "weekly dinner plan", user_id)
        return len(dinners)

    def get_weekly_plan(
        self, user_id: int, start_date: dt.date, end_date: dt.date
    ) -> WeeklyDinnerPlan:
        """The caller's dinners between two dates, arranged by weekday."""
        self.log_debug(
            "Fetching weekly dinner plan",
            user_id=user_id,
            start_date=start_date,
            end_date=end_date,
        )
        self.validate_plan_range(start_date, end_date)

        dinners = self.repository.get_by_date_range_and_user(
            user_id, start_date, end_date
        )

        self.log_operation_success("retrieved", "weekly dinner plan", user_id)
        return self.weekly_mapper.to_dto(dinners, start_date, end_date)
