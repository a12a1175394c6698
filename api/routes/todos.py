"""ToDo routes"""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import Pagination, get_current_user_id, get_todo_service
from api.responses import RESOURCE_ERROR_RESPONSES, PaginatedResponse, paginated_response
from domain.schemas.todo_schemas import ToDoRequest, ToDoResponse
from services import TodoService

router = APIRouter(prefix="/todo", tags=["ToDo"], responses=RESOURCE_ERROR_RESPONSES)
logger = logging.getLogger("planit.api.todo")


@router.post("/register", response_model=ToDoResponse, status_code=status.HTTP_201_CREATED)
def register_todo(
    payload: ToDoRequest,
    user_id: int = Depends(get_current_user_id),
    service: TodoService = Depends(get_todo_service),
):
    """Register a new todo item owned by the caller"""
    return service.create(user_id, payload)


@router.get("/", response_model=PaginatedResponse[ToDoResponse])
@router.get("", response_model=PaginatedResponse[ToDoResponse], include_in_schema=False)
def get_todos(
    pagination: Pagination = Depends(),
    user_id: int = Depends(get_current_user_id),
    service: TodoService = Depends(get_todo_service),
):
    items = service.get_all(user_id, pagination.page_nr, pagination.page_size)
    total = service.count_all(user_id)
    logger.info("Returning %d of %d items for user %s", len(items), total, user_id)
    return paginated_response(items, total, pagination.page_nr, pagination.page_size)


@router.get("/{todo_id}", response_model=ToDoResponse)
def get_todo(
    todo_id: int,
    user_id: int = Depends(get_current_user_id),
    service: TodoService = Depends(get_todo_service),
):
    return service.get_by_id(user_id, todo_id)


@router.put("/{todo_id}", response_model=ToDoResponse)
def update_todo(
    todo_id: int,
    payload: ToDoRequest,
    user_id: int = Depends(get_current_user_id),
    service: TodoService = Depends(get_todo_service),
):
    return service.update(user_id, todo_id, payload)


@router.delete("/{todo_id}", response_model=ToDoResponse)
def delete_todo(
    todo_id: int,
    user_id: int = Depends(get_current_user_id),
    service: TodoService = Depends(get_todo_service),
):
    return service.delete(user_id, todo_id)
