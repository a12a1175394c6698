"""Invitation routes"""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import Pagination, get_current_user_id, get_invite_service
from api.responses import RESOURCE_ERROR_RESPONSES, PaginatedResponse, paginated_response
from domain.schemas.event_schemas import InviteRequest, InviteResponse
from services import InviteService

router = APIRouter(prefix="/invite", tags=["Invite"], responses=RESOURCE_ERROR_RESPONSES)
logger = logging.getLogger("planit.api.invite")


@router.post("/register", response_model=InviteResponse, status_code=status.HTTP_201_CREATED)
def register_invite(
    payload: InviteRequest,
    user_id: int = Depends(get_current_user_id),
    service: InviteService = Depends(get_invite_service),
):
    """Invite a guest to one of the caller's events"""
    return service.create(user_id, payload)


@router.get("/", response_model=PaginatedResponse[InviteResponse])
@router.get("", response_model=PaginatedResponse[InviteResponse], include_in_schema=False)
def get_invites(
    pagination: Pagination = Depends(),
    user_id: int = Depends(get_current_user_id),
    service: InviteService = Depends(get_invite_service),
):
    """List invites to the caller's events"""
    items = service.get_all(user_id, pagination.page_nr, pagination.page_size)
    total = service.count_all(user_id)
    logger.info("Returning %d of %d items for user %s", len(items), total, user_id)
    return paginated_response(items, total, pagination.page_nr, pagination.page_size)


@router.get("/{invite_id}", response_model=InviteResponse)
def get_invite(
    invite_id: int,
    user_id: int = Depends(get_current_user_id),
    service: InviteService = Depends(get_invite_service),
):
    return service.get_by_id(user_id, invite_id)


@router.put("/{invite_id}", response_model=InviteResponse)
def update_invite(
    invite_id: int,
    payload: InviteRequest,
    user_id: int = Depends(get_current_user_id),
    service: InviteService = Depends(get_invite_service),
):
    return service.update(user_id, invite_id, payload)


@router.delete("/{invite_id}", response_model=InviteResponse)
def delete_invite(
    invite_id: int,
    user_id: int = Depends(get_current_user_id),
    service: InviteService = Depends(get_invite_service),
):
    return service.delete(user_id, invite_id)
