"""Event routes"""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import Pagination, get_current_user_id, get_event_service
from api.responses import RESOURCE_ERROR_RESPONSES, PaginatedResponse, paginated_response
from domain.schemas.event_schemas import EventRequest, EventResponse
from services import EventService

router = APIRouter(prefix="/event", tags=["Event"], responses=RESOURCE_ERROR_RESPONSES)
logger = logging.getLogger("planit.api.event")


@router.post("/register", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def register_event(
    payload: EventRequest,
    user_id: int = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service),
):
    """Register a new event organized by the caller"""
    return service.create(user_id, payload)


@router.get("/", response_model=PaginatedResponse[EventResponse])
@router.get("", response_model=PaginatedResponse[EventResponse], include_in_schema=False)
def get_events(
    pagination: Pagination = Depends(),
    user_id: int = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service),
):
    items = service.get_all(user_id, pagination.page_nr, pagination.page_size)
    total = service.count_all(user_id)
    logger.info("Returning %d of %d items for user %s", len(items), total, user_id)
    return paginated_response(items, total, pagination.page_nr, pagination.page_size)


@router.get("/{event_id}", response_model=EventResponse)
def get_event(
    event_id: int,
    user_id: int = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service),
):
    return service.get_by_id(user_id, event_id)


@router.put("/{event_id}", response_model=EventResponse)
def update_event(
    event_id: int,
    payload: EventRequest,
    user_id: int = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service),
):
    return service.update(user_id, event_id, payload)


@router.delete("/{event_id}", response_model=EventResponse)
def delete_event(
    event_id: int,
    user_id: int = Depends(get_current_user_id),
    service: EventService = Depends(get_event_service),
):
    """Delete an event together with its invites"""
    return service.delete(user_id, event_id)
