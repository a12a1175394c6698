"""
Shopping list models.
"""

from sqlalchemy import Column, Integer, Text

from domain.models.database import Base


class ShoppingList(Base):
    """A named shopping list belonging to a user"""

    __tablename__ = "shopping_list"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    name = Column(Text, nullable=False)
