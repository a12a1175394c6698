"""Dinner planning routes"""

import logging
from datetime import date, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import Pagination, get_current_user_id, get_dinner_service
from api.responses import RESOURCE_ERROR_RESPONSES, PaginatedResponse, paginated_response
from domain.schemas.dinner_schemas import (
    DinnerRequest,
    DinnerResponse,
    WeeklyDinnerPlan,
    WeeklyPlanRegistered,
)
from services import DinnerService

router = APIRouter(prefix="/dinner", tags=["Dinner"], responses=RESOURCE_ERROR_RESPONSES)
logger = logging.getLogger("planit.api.dinner")


@router.post("/register", response_model=DinnerResponse, status_code=status.HTTP_201_CREATED)
def register_dinner(
    payload: DinnerRequest,
    user_id: int = Depends(get_current_user_id),
    service: DinnerService = Depends(get_dinner_service),
):
    """Register a new dinner owned by the caller"""
    return service.create(user_id, payload)


@router.get("/", response_model=PaginatedResponse[DinnerResponse])
@router.get("", response_model=PaginatedResponse[DinnerResponse], include_in_schema=False)
def get_dinners(
    pagination: Pagination = Depends(),
    user_id: int = Depends(get_current_user_id),
    service: DinnerService = Depends(get_dinner_service),
):
    """List the caller's dinners, one page at a time"""
    items = service.get_all(user_id, pagination.page_nr, pagination.page_size)
    total = service.count_all(user_id)
    logger.info("Returning %d of %d items for user %s", len(items), total, user_id)
    return paginated_response(items, total, pagination.page_nr, pagination.page_size)


@router.post(
    "/weeklyplan",
    response_model=WeeklyPlanRegistered,
    status_code=status.HTTP_201_CREATED,
)
def register_weekly_plan(
    plan: WeeklyDinnerPlan,
    user_id: int = Depends(get_current_user_id),
    service: DinnerService = Depends(get_dinner_service),
):
    """
    Register a week of dinners in one request.

    Every weekday with a name becomes a dinner on the matching date between
    start_date and end_date. A dinner already planned on one of those dates
    is renamed.
    """
    count = service.register_weekly_plan(user_id, plan)
    logger.info("Registered %d planned dinners for user %s", count, user_id)
    return WeeklyPlanRegistered(registered=True, dinners=count)


@router.get("/weeklyplan", response_model=WeeklyDinnerPlan)
def get_weekly_plan(
    start_date: date = Query(..., description="First day of the plan"),
    end_date: Optional[date] = Query(
        None, description="Last day of the plan (defaults to start_date + 6 days)"
    ),
    user_id: int = Depends(get_current_user_id),
    service: DinnerService = Depends(get_dinner_service),
):
    """Get the caller's dinners between two dates arranged by weekday"""
    if end_date is None:
        end_date = start_date + timedelta(days=6)
    return service.get_weekly_plan(user_id, start_date, end_date)


@router.get("/{dinner_id}", response_model=DinnerResponse)
def get_dinner(
    dinner_id: int,
    user_id: int = Depends(get_current_user_id),
    service: DinnerService = Depends(get_dinner_service),
):
    return service.get_by_id(user_id, dinner_id)


@router.put("/{dinner_id}", response_model=DinnerResponse)
def update_dinner(
    dinner_id: int,
    payload: DinnerRequest,
    user_id: int = Depends(get_current_user_id),
    service: DinnerService = Depends(get_dinner_service),
):
    return service.update(user_id, dinner_id, payload)


@router.delete("/{dinner_id}", response_model=DinnerResponse)
def delete_dinner(
    dinner_id: int,
    user_id: int = Depends(get_current_user_id),
    service: DinnerService = Depends(get_dinner_service),
):
    """Delete a dinner and return what was deleted"""
    return service.delete(user_id, dinner_id)
