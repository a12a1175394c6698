"""
Event and invitation models.
"""

from sqlalchemy import Column, Integer, Text, Date, Time, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from domain.models.database import Base


class Event(Base):
    """An event organized by a user"""

    __tablename__ = "event"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    name = Column(Text, nullable=False)
    location = Column(Text)
    date = Column(Date)
    time = Column(Time)

    invites = relationship(
        "Invite", back_populates="event", cascade="all, delete-orphan"
    )


class Invite(Base):
    """An invitation to an event; owned through its event"""

    __tablename__ = "invite"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(
        Integer,
        ForeignKey("event.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    coming = Column(Boolean, nullable=False, default=False)

    event = relationship("Event", back_populates="invites")
