# app/schemas/user_follow.py

from typing import List, Optional
from pydantic import BaseModel, Field
from datetime import datetime
from app.schemas.common import Pagination


class FollowStats(BaseModel):
    user_id: int = Field(description="User ID")
    followers_count: int = Field(description="Number of followers")
    following_count: int = Field(description="Number of users followed")


class FollowUser(BaseModel):
    user_id: int = Field(description="User ID")
    username: str = Field(description="Username")
    display_name: Optional[str] = Field(default=None, description="Display name")
    avatar_url: Optional[str] = Field(default=None, description="Avatar URL")
    bio: Optional[str] = Field(default=None, description="Short bio")
    is_following: bool = Field(default=False, description="Whether the viewer follows this user")
    followed_at: Optional[datetime] = Field(default=None, description="When the edge was created")


class FollowListResponse(BaseModel):
    success: bool = Field(default=True)
    items: List[FollowUser] = Field(description="Users")
    pagination: Pagination


class FollowCheckResponse(BaseModel):
    success: bool = Field(default=True)
    following: bool = Field(description="Whether the current user follows the target")


class FollowStatsResponse(BaseModel):
    success: bool = Field(default=True)
    stats: FollowStats
