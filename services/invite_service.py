"""Invitation service"""

from typing import Optional

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, UnauthorizedError
from domain.mappers import InviteMapper
from domain.models import Invite
from domain.schemas.event_schemas import InviteRequest, InviteResponse
from repositories import EventRepository, InviteRepository
from services.base_service import OwnedResourceService


class InviteService(OwnedResourceService[Invite, InviteRequest, InviteResponse]):
    """
    Business logic for invitations.

    An invite carries no owner of its own: the user who owns the invite's
    event owns the invite. An invite whose event no longer exists is owned
    by nobody.
    """

    resource_name = "invite"

    def __init__(self, db: Session):
        super().__init__(
            db, InviteRepository(db), InviteMapper(), logger_name="planit.invite"
        )
        self.event_repository = EventRepository(db)

    def owner_of(self, entity: Invite) -> Optional[int]:
        event = self.event_repository.get_by_id(entity.event_id)
        return event.user_id if event is not None else None

    def _check_event_owner(self, event_id: int, user_id: int) -> None:
        """
        Raises:
            NotFoundError: If the event does not exist
            UnauthorizedError: If the event belongs to another user
        """
        event = self.event_repository.get_by_id(event_id)
        if event is None:
            self.log_not_found("event", event_id)
            raise NotFoundError.for_resource("event", event_id)
        if event.user_id != user_id:
            self.log_unauthorized_access("event", event_id, user_id)
            raise UnauthorizedError.for_resource("event", event_id)

    def assign_owner(self, entity: Invite, user_id: int) -> None:
        self._check_event_owner(entity.event_id, user_id)

    def check_update(self, entity: Invite, values: dict, user_id: int) -> None:
        new_event_id = values.get("event_id", entity.event_id)
        if new_event_id != entity.event_id:
            self._check_event_owner(new_event_id, user_id)
