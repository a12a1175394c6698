"""
Tests for invitations, which are owned through the event they belong to.

This test suite validates:
- Creating an invite requires the caller to own an existing event
- Reading, updating and deleting resolve the owner via the event
- Moving an invite to another event re-checks ownership of that event
- Invites disappear together with their event
"""

import pytest
from sqlalchemy.orm import Session

from test_fixtures import db_session, SARAH, MICHAEL
from app.exceptions import NotFoundError, UnauthorizedError
from domain.models import Invite
from domain.schemas import EventRequest, InviteRequest
from repositories import InviteRepository
from services import EventService, InviteService


def _event(db: Session, user_id: int, name: str = "Garden party") -> int:
    return EventService(db).create(user_id, EventRequest(name=name)).id


def _invite_request(event_id: int, name: str = "Emma", coming: bool = False) -> InviteRequest:
    return InviteRequest(
        event_id=event_id, name=name, email=f"{name.lower()}@example.com", coming=coming
    )


# =============================================================================
# CREATE
# =============================================================================


def test_create_invite_for_own_event(db_session: Session):
    event_id = _event(db_session, SARAH)
    service = InviteService(db_session)

    invite = service.create(SARAH, _invite_request(event_id))

    assert invite.id > 0
    assert invite.event_id == event_id
    assert invite.email == "emma@example.com"
    assert invite.coming is False


def test_create_invite_for_missing_event_is_not_found(db_session: Session):
    service = InviteService(db_session)

    with pytest.raises(NotFoundError) as exc_info:
        service.create(SARAH, _invite_request(12345))

    assert exc_info.value.details["resource"] == "event"
    assert InviteRepository(db_session).get_all() == []


def test_create_invite_for_foreign_event_is_unauthorized(db_session: Session):
    event_id = _event(db_session, MICHAEL)
    service = InviteService(db_session)

    with pytest.raises(UnauthorizedError):
        service.create(SARAH, _invite_request(event_id))


# =============================================================================
# READ / UPDATE / DELETE
# =============================================================================


def test_event_owner_can_read_invite(db_session: Session):
    event_id = _event(db_session, SARAH)
    service = InviteService(db_session)
    invite = service.create(SARAH, _invite_request(event_id, name="Raj"))

    assert service.get_by_id(SARAH, invite.id).name == "Raj"
    with pytest.raises(UnauthorizedError):
        service.get_by_id(MICHAEL, invite.id)


def test_invite_without_event_is_owned_by_nobody(db_session: Session):
    """
    Verifies:
    - An invite whose event_id points nowhere exists but cannot be accessed
    - The caller gets UnauthorizedError, not NotFoundError
    """
    orphan = InviteRepository(db_session).create(
        Invite(event_id=777, name="Ghost", email="ghost@example.com")
    )
    assert orphan is not None

    with pytest.raises(UnauthorizedError):
        InviteService(db_session).get_by_id(SARAH, orphan.id)


def test_accept_invite(db_session: Session):
    event_id = _event(db_session, SARAH)
    service = InviteService(db_session)
    invite = service.create(SARAH, _invite_request(event_id))

    updated = service.update(SARAH, invite.id, _invite_request(event_id, coming=True))

    assert updated.coming is True
    assert updated.id == invite.id


def test_move_invite_to_another_own_event(db_session: Session):
    first = _event(db_session, SARAH, "Brunch")
    second = _event(db_session, SARAH, "Dinner party")
    service = InviteService(db_session)
    invite = service.create(SARAH, _invite_request(first))

    moved = service.update(SARAH, invite.id, _invite_request(second))

    assert moved.event_id == second


def test_move_invite_to_foreign_event_is_unauthorized(db_session: Session):
    """
    Verifies:
    - Pointing an own invite at another user's event is rejected
    - The invite still belongs to the original event
    """
    own = _event(db_session, SARAH)
    foreign = _event(db_session, MICHAEL)
    service = InviteService(db_session)
    invite = service.create(SARAH, _invite_request(own))

    with pytest.raises(UnauthorizedError):
        service.update(SARAH, invite.id, _invite_request(foreign))

    assert service.get_by_id(SARAH, invite.id).event_id == own


def test_move_invite_to_missing_event_is_not_found(db_session: Session):
    own = _event(db_session, SARAH)
    service = InviteService(db_session)
    invite = service.create(SARAH, _invite_request(own))

    with pytest.raises(NotFoundError):
        service.update(SARAH, invite.id, _invite_request(4040))


def test_delete_invite(db_session: Session):
    event_id = _event(db_session, SARAH)
    service = InviteService(db_session)
    invite = service.create(SARAH, _invite_request(event_id))

    deleted = service.delete(SARAH, invite.id)

    assert deleted.id == invite.id
    with pytest.raises(NotFoundError):
        service.get_by_id(SARAH, invite.id)


# =============================================================================
# LISTING AND CASCADE
# =============================================================================


def test_list_invites_of_own_events_only(db_session: Session):
    own = _event(db_session, SARAH)
    foreign = _event(db_session, MICHAEL)
    service = InviteService(db_session)
    service.create(SARAH, _invite_request(own, name="Emma"))
    service.create(MICHAEL, _invite_request(foreign, name="Liam"))
    service.create(SARAH, _invite_request(own, name="Noah"))

    invites = service.get_all(SARAH, page_nr=1, page_size=10)

    assert [i.name for i in invites] == ["Emma", "Noah"]
    assert service.count_all(SARAH) == 2
    assert service.count_all(MICHAEL) == 1


def test_deleting_event_removes_invites(db_session: Session):
    event_id = _event(db_session, SARAH)
    invites = InviteService(db_session)
    invite = invites.create(SARAH, _invite_request(event_id))

    EventService(db_session).delete(SARAH, event_id)

    with pytest.raises(NotFoundError):
        invites.get_by_id(SARAH, invite.id)
    assert invites.count_all(SARAH) == 0
