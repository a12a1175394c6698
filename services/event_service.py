"""Event service"""

from sqlalchemy.orm import Session

from domain.mappers import EventMapper
from domain.models import Event
from domain.schemas.event_schemas import EventRequest, EventResponse
from repositories import EventRepository
from services.base_service import OwnedResourceService


class EventService(OwnedResourceService[Event, EventRequest, EventResponse]):
    """Business logic for events. Deleting an event also deletes its invites."""

    resource_name = "event"

    def __init__(self, db: Session):
        super().__init__(
            db, EventRepository(db), EventMapper(), logger_name="planit.event"
        )
