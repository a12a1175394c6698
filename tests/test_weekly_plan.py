"""
Tests for weekly dinner plans.

This test suite validates:
- Range validation (order, at most seven days, default end date)
- Registering a plan creates one dinner per named weekday
- Registering over existing dinners renames them
- Reading a plan arranges the caller's dinners by weekday
"""

import datetime as dt

import pytest
from sqlalchemy.orm import Session

from test_fixtures import db_session, SARAH, MICHAEL, WEEK_START
from app.exceptions import OperationFailedError, ServiceValidationError
from domain.schemas import DinnerRequest, WeeklyDinnerPlan
from repositories import DinnerRepository
from services import DinnerService
from services.dinner_service import MAX_PLAN_DAYS


# =============================================================================
# PLAN SCHEMA
# =============================================================================


def test_end_date_defaults_to_six_days_later():
    plan = WeeklyDinnerPlan(start_date=WEEK_START)

    assert plan.end_date == WEEK_START + dt.timedelta(days=6)
    assert len(list(plan.dates())) == 7


def test_plan_expands_only_named_days():
    """
    Verifies:
    - Each named weekday becomes one DinnerRequest on the matching date
    - Blank names are skipped and surrounding whitespace is stripped
    """
    plan = WeeklyDinnerPlan(
        start_date=WEEK_START,
        monday_dinner="Chili",
        wednesday_dinner="  Ramen ",
        friday_dinner="   ",
    )

    requests = plan.to_dinner_requests()

    assert [(r.date, r.name) for r in requests] == [
        (WEEK_START, "Chili"),
        (WEEK_START + dt.timedelta(days=2), "Ramen"),
    ]


def test_plan_starting_midweek_wraps_weekdays():
    thursday = WEEK_START + dt.timedelta(days=3)
    plan = WeeklyDinnerPlan(
        start_date=thursday, monday_dinner="Soup", thursday_dinner="Pie"
    )

    requests = plan.to_dinner_requests()

    assert [(r.date, r.name) for r in requests] == [
        (thursday, "Pie"),
        (thursday + dt.timedelta(days=4), "Soup"),
    ]


# =============================================================================
# RANGE VALIDATION
# =============================================================================


def test_end_before_start_is_rejected():
    with pytest.raises(ServiceValidationError):
        DinnerService.validate_plan_range(WEEK_START, WEEK_START - dt.timedelta(days=1))


def test_range_longer_than_a_week_is_rejected():
    with pytest.raises(ServiceValidationError):
        DinnerService.validate_plan_range(
            WEEK_START, WEEK_START + dt.timedelta(days=MAX_PLAN_DAYS)
        )


def test_single_day_and_full_week_are_valid():
    DinnerService.validate_plan_range(WEEK_START, WEEK_START)
    DinnerService.validate_plan_range(
        WEEK_START, WEEK_START + dt.timedelta(days=MAX_PLAN_DAYS - 1)
    )


# =============================================================================
# REGISTER
# =============================================================================


def test_register_weekly_plan_creates_dinners(db_session: Session):
    service = DinnerService(db_session)
    plan = WeeklyDinnerPlan(
        start_date=WEEK_START,
        monday_dinner="Chili",
        tuesday_dinner="Tacos",
        sunday_dinner="Roast",
    )

    stored = service.register_weekly_plan(SARAH, plan)

    assert stored == 3
    dinners = DinnerRepository(db_session).get_by_user(SARAH)
    assert [(d.date, d.name) for d in dinners] == [
        (WEEK_START, "Chili"),
        (WEEK_START + dt.timedelta(days=1), "Tacos"),
        (WEEK_START + dt.timedelta(days=6), "Roast"),
    ]


def test_register_weekly_plan_renames_existing_dinner(db_session: Session):
    service = DinnerService(db_session)
    existing = service.create(SARAH, DinnerRequest(name="Leftovers", date=WEEK_START))

    service.register_weekly_plan(
        SARAH, WeeklyDinnerPlan(start_date=WEEK_START, monday_dinner="Gnocchi")
    )

    assert service.count_all(SARAH) == 1
    assert service.get_by_id(SARAH, existing.id).name == "Gnocchi"


def test_register_does_not_touch_other_users(db_session: Session):
    service = DinnerService(db_session)
    michaels = service.create(MICHAEL, DinnerRequest(name="Burgers", date=WEEK_START))

    service.register_weekly_plan(
        SARAH, WeeklyDinnerPlan(start_date=WEEK_START, monday_dinner="Salad")
    )

    assert service.get_by_id(MICHAEL, michaels.id).name == "Burgers"
    assert service.count_all(SARAH) == 1


def test_register_empty_plan_is_rejected(db_session: Session):
    service = DinnerService(db_session)

    with pytest.raises(ServiceValidationError):
        service.register_weekly_plan(SARAH, WeeklyDinnerPlan(start_date=WEEK_START))


def test_register_invalid_range_is_rejected(db_session: Session):
    service = DinnerService(db_session)
    plan = WeeklyDinnerPlan(
        start_date=WEEK_START,
        end_date=WEEK_START + dt.timedelta(days=10),
        monday_dinner="Chili",
    )

    with pytest.raises(ServiceValidationError):
        service.register_weekly_plan(SARAH, plan)
    assert service.count_all(SARAH) == 0


def test_register_repository_failure(db_session: Session, monkeypatch):
    service = DinnerService(db_session)
    monkeypatch.setattr(service.repository, "add_weekly_dinners", lambda dinners: False)

    with pytest.raises(OperationFailedError) as exc_info:
        service.register_weekly_plan(
            SARAH, WeeklyDinnerPlan(start_date=WEEK_START, monday_dinner="Chili")
        )

    assert exc_info.value.details["operation"] == "register"


# =============================================================================
# READ
# =============================================================================


def test_get_weekly_plan_places_dinners_by_weekday(db_session: Session):
    """
    Verifies:
    - Each dinner lands in the slot of its weekday
    - Days without a dinner stay None
    - Other users' dinners and dinners outside the range are ignored
    """
    service = DinnerService(db_session)
    service.create(SARAH, DinnerRequest(name="Curry", date=WEEK_START + dt.timedelta(days=2)))
    service.create(SARAH, DinnerRequest(name="Pizza", date=WEEK_START + dt.timedelta(days=4)))
    service.create(SARAH, DinnerRequest(name="Next week", date=WEEK_START + dt.timedelta(days=7)))
    service.create(MICHAEL, DinnerRequest(name="Burgers", date=WEEK_START))

    plan = service.get_weekly_plan(SARAH, WEEK_START, WEEK_START + dt.timedelta(days=6))

    assert plan.start_date == WEEK_START
    assert plan.wednesday_dinner == "Curry"
    assert plan.friday_dinner == "Pizza"
    assert plan.monday_dinner is None
    assert plan.sunday_dinner is None


def test_get_weekly_plan_latest_dinner_wins(db_session: Session):
    service = DinnerService(db_session)
    service.create(SARAH, DinnerRequest(name="First idea", date=WEEK_START))
    service.create(SARAH, DinnerRequest(name="Second idea", date=WEEK_START))

    plan = service.get_weekly_plan(SARAH, WEEK_START, WEEK_START + dt.timedelta(days=6))

    assert plan.monday_dinner == "Second idea"


def test_get_weekly_plan_for_empty_week(db_session: Session):
    service = DinnerService(db_session)

    plan = service.get_weekly_plan(SARAH, WEEK_START, WEEK_START + dt.timedelta(days=6))

    assert plan.to_dinner_requests() == []


def test_get_weekly_plan_rejects_long_range(db_session: Session):
    service = DinnerService(db_session)

    with pytest.raises(ServiceValidationError):
        service.get_weekly_plan(SARAH, WEEK_START, WEEK_START + dt.timedelta(days=30))
