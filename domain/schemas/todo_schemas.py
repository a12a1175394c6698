"""Pydantic schemas for todo items."""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field


class ToDoRequest(BaseModel):
    """Request body for creating or updating a todo item."""

    name: str = Field(..., min_length=1, max_length=100, description="What needs doing")
    date: Optional[dt.date] = Field(None, description="Due date")


class ToDoResponse(BaseModel):
    id: int
    user_id: int
    name: str
    date: Optional[dt.date] = None

    model_config = {"from_attributes": True}
