"""
API dependencies for dependency injection
"""

from typing import Generator, Optional

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from app.security import user_id_from_token
from domain.models import get_db_session
from services import (
    DinnerService,
    EventService,
    InviteService,
    ShoppingListService,
    TodoService,
)

bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> int:
    """
    Resolve the caller's user id from the ``Authorization: Bearer`` header.

    Raises:
        HTTPException: 401 when the header is missing or the token is invalid
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return user_id_from_token(credentials.credentials)
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


class Pagination:
    """``page_nr``/``page_size`` query parameters shared by list endpoints"""

    def __init__(
        self,
        page_nr: int = Query(default=1, ge=1, description="Page number, starting at 1"),
        page_size: int = Query(
            default=settings.default_page_size,
            ge=1,
            le=settings.max_page_size,
            description="Number of items per page",
        ),
    ):
        self.page_nr = page_nr
        self.page_size = page_size


def get_dinner_service(db: Session = Depends(get_db)) -> DinnerService:
    return DinnerService(db)


def get_todo_service(db: Session = Depends(get_db)) -> TodoService:
    return TodoService(db)


def get_event_service(db: Session = Depends(get_db)) -> EventService:
    return EventService(db)


def get_invite_service(db: Session = Depends(get_db)) -> InviteService:
    return InviteService(db)


def get_shopping_list_service(db: Session = Depends(get_db)) -> ShoppingListService:
    return ShoppingListService(db)
