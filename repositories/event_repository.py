"""
Event Repository - Data access layer for events and invitations
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Event, Invite


class EventRepository(BaseRepository[Event]):
    """Repository for event data access"""

    def __init__(self, db: Session):
        super().__init__(db, Event)


class InviteRepository(BaseRepository[Invite]):
    """
    Repository for invitation data access.

    Invites have no owner column of their own; a user's invites are the
    invites to events that user owns.
    """

    def __init__(self, db: Session):
        super().__init__(db, Invite)

    def get_by_event(self, event_id: int) -> List[Invite]:
        """Get all invites to an event"""
        return (
            self.db.query(Invite)
            .filter(Invite.event_id == event_id)
            .order_by(Invite.id)
            .all()
        )

    def get_by_user(self, user_id: int, skip: int = 0, limit: int = 100) -> List[Invite]:
        """Get invites to events owned by a user"""
        return (
            self.db.query(Invite)
            .join(Event, Invite.event_id == Event.id)
            .filter(Event.user_id == user_id)
            .order_by(Invite.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count_by_user(self, user_id: int) -> int:
        """Count invites to events owned by a user"""
        return (
            self.db.query(Invite)
            .join(Event, Invite.event_id == Event.id)
            .filter(Event.user_id == user_id)
            .count()
        )
