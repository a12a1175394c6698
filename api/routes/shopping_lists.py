"""Shopping list routes"""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import Pagination, get_current_user_id, get_shopping_list_service
from api.responses import RESOURCE_ERROR_RESPONSES, PaginatedResponse, paginated_response
from domain.schemas.shopping_schemas import ShoppingListRequest, ShoppingListResponse
from services import ShoppingListService

router = APIRouter(
    prefix="/shoppinglist", tags=["Shopping List"], responses=RESOURCE_ERROR_RESPONSES
)
logger = logging.getLogger("planit.api.shopping")


@router.post(
    "/register", response_model=ShoppingListResponse, status_code=status.HTTP_201_CREATED
)
def register_shopping_list(
    payload: ShoppingListRequest,
    user_id: int = Depends(get_current_user_id),
    service: ShoppingListService = Depends(get_shopping_list_service),
):
    return service.create(user_id, payload)


@router.get("/", response_model=PaginatedResponse[ShoppingListResponse])
@router.get("", response_model=PaginatedResponse[ShoppingListResponse], include_in_schema=False)
def get_shopping_lists(
    pagination: Pagination = Depends(),
    user_id: int = Depends(get_current_user_id),
    service: ShoppingListService = Depends(get_shopping_list_service),
):
    items = service.get_all(user_id, pagination.page_nr, pagination.page_size)
    total = service.count_all(user_id)
    logger.info("Returning %d of %d items for user %s", len(items), total, user_id)
    return paginated_response(items, total, pagination.page_nr, pagination.page_size)


@router.get("/{list_id}", response_model=ShoppingListResponse)
def get_shopping_list(
    list_id: int,
    user_id: int = Depends(get_current_user_id),
    service: ShoppingListService = Depends(get_shopping_list_service),
):
    return service.get_by_id(user_id, list_id)


@router.put("/{list_id}", response_model=ShoppingListResponse)
def update_shopping_list(
    list_id: int,
    payload: ShoppingListRequest,
    user_id: int = Depends(get_current_user_id),
    service: ShoppingListService = Depends(get_shopping_list_service),
):
    """Rename a shopping list"""
    return service.update(user_id, list_id, payload)


@router.delete("/{list_id}", response_model=ShoppingListResponse)
def delete_shopping_list(
    list_id: int,
    user_id: int = Depends(get_current_user_id),
    service: ShoppingListService = Depends(get_shopping_list_service),
):
    return service.delete(user_id, list_id)
