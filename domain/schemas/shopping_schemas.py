"""Pydantic schemas for shopping lists."""

from pydantic import BaseModel, Field


class ShoppingListRequest(BaseModel):
    """Request body for creating or renaming a shopping list."""

    name: str = Field(..., min_length=1, max_length=100, description="List name")


class ShoppingListResponse(BaseModel):
    id: int
    user_id: int
    name: str

    model_config = {"from_attributes": True}
