"""
Dinner planning models.
"""

from sqlalchemy import Column, Integer, Text, Date, Index

from domain.models.database import Base


class Dinner(Base):
    """A dinner planned by a user for a given date"""

    __tablename__ = "dinner"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    name = Column(Text, nullable=False)
    date = Column(Date, nullable=False)

    __table_args__ = (Index("ix_dinner_user_date", "user_id", "date"),)
