"""Pydantic schemas for events and invitations."""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class EventRequest(BaseModel):
    """Request body for creating or updating an event."""

    name: str = Field(..., min_length=1, max_length=100)
    location: Optional[str] = Field(None, max_length=200)
    date: Optional[dt.date] = None
    time: Optional[dt.time] = None


class EventResponse(BaseModel):
    id: int
    user_id: int
    name: str
    location: Optional[str] = None
    date: Optional[dt.date] = None
    time: Optional[dt.time] = None

    model_config = {"from_attributes": True}


class InviteRequest(BaseModel):
    """Request body for creating or updating an invitation."""

    event_id: int = Field(..., ge=1, description="Event the guest is invited to")
    name: str = Field(..., min_length=1, max_length=100, description="Guest name")
    email: EmailStr = Field(..., description="Guest email address")
    coming: bool = Field(default=False, description="Whether the guest accepted")


class InviteResponse(BaseModel):
    id: int
    event_id: int
    name: str
    email: str
    coming: bool

    model_config = {"from_attributes": True}
