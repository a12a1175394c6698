"""
Event domain mappers.
Handles transformation between ORM models and DTOs for events and invitations.
"""

from domain.mappers.base import BaseMapper
from domain.models import Event, Invite
from domain.schemas.event_schemas import (
    EventRequest,
    EventResponse,
    InviteRequest,
    InviteResponse,
)


class EventMapper(BaseMapper[Event, EventRequest, EventResponse]):
    model = Event
    response_schema = EventResponse


class InviteMapper(BaseMapper[Invite, InviteRequest, InviteResponse]):
    model = Invite
    response_schema = InviteResponse
