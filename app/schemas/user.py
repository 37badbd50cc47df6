# app/schemas/user.py

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class User(BaseModel):
    user_id: int = Field(description="User ID")
    username: str = Field(description="Unique username")
    email: str = Field(description="Email")
    display_name: Optional[str] = Field(default=None, description="Display name")
    avatar_url: Optional[str] = Field(default=None, description="Avatar URL")
    bio: Optional[str] = Field(default=None, description="Short bio")
    is_admin: bool = Field(default=False, description="Administrator flag")
    is_active: bool = Field(default=True, description="Active flag")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    last_login: Optional[datetime] = Field(default=None, description="Last login")

    class Config:
        from_attributes = True


class UserProfile(BaseModel):
    """Public projection of a user, safe to embed anywhere"""

    user_id: int = Field(description="User ID")
    username: str = Field(description="Username")
    display_name: Optional[str] = Field(default=None, description="Display name")
    avatar_url: Optional[str] = Field(default=None, description="Avatar URL")

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    username: str = Field(description="Username", min_length=3, max_length=50)
    email: str = Field(description="Email", min_length=3, max_length=255)
    password: str = Field(description="Password", min_length=6)
    display_name: Optional[str] = Field(default=None, description="Display name", max_length=100)


class UserLogin(BaseModel):
    email: str = Field(description="Email")
    password: str = Field(description="Password")


class TokenResponse(BaseModel):
    success: bool = Field(default=True)
    access_token: str = Field(description="Access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: User = Field(description="Authenticated user")


class UserDetail(BaseModel):
    """User profile with social counters"""

    user_id: int = Field(description="User ID")
    username: str = Field(description="Username")
    email: Optional[str] = Field(default=None, description="Email (owner only)")
    display_name: Optional[str] = Field(default=None, description="Display name")
    avatar_url: Optional[str] = Field(default=None, description="Avatar URL")
    bio: Optional[str] = Field(default=None, description="Short bio")
    created_at: Optional[datetime] = Field(default=None, description="Joined at")

    followers_count: int = Field(default=0, description="Number of followers")
    following_count: int = Field(default=0, description="Number of users followed")
    reviews_count: int = Field(default=0, description="Number of reviews written")
    is_following: bool = Field(default=False, description="Whether the viewer follows this user")


class UserDetailResponse(BaseModel):
    success: bool = Field(default=True)
    user: UserDetail
