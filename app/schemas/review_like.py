# app/schemas/review_like.py

from typing import List, Optional
from pydantic import BaseModel, Field
from datetime import datetime
from app.schemas.common import Pagination


class LikeUser(BaseModel):
    user_id: int = Field(description="User ID")
    username: str = Field(description="Username")
    display_name: Optional[str] = Field(default=None, description="Display name")
    avatar_url: Optional[str] = Field(default=None, description="Avatar URL")
    liked_at: Optional[datetime] = Field(default=None, description="When the like was created")


class LikeListResponse(BaseModel):
    success: bool = Field(default=True)
    items: List[LikeUser] = Field(description="Users who liked the review")
    pagination: Pagination


class LikeCheckResponse(BaseModel):
    success: bool = Field(default=True)
    liked: bool = Field(description="Whether the current user liked the review")
