"""
ToDo models.
"""

from sqlalchemy import Column, Integer, Text, Date

from domain.models.database import Base


class ToDo(Base):
    """A user's todo item"""

    __tablename__ = "todo"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    name = Column(Text, nullable=False)
    date = Column(Date)
