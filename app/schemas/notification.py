# app/schemas/notification.py

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from datetime import datetime
from app.schemas.common import Pagination


class Notification(BaseModel):
    notification_id: int = Field(description="Notification ID")
    user_id: int = Field(description="Recipient ID")
    type: str = Field(description="Notification type (follow, like, comment, ...)")
    title: str = Field(description="Title")
    message: str = Field(description="Message")
    data: Optional[Dict[str, Any]] = Field(default=None, description="Actor/subject ids")
    is_read: bool = Field(default=False, description="Read flag")
    created_at: Optional[datetime] = Field(default=None, description="Created at")

    class Config:
        from_attributes = True


class NotificationListResponse(BaseModel):
    success: bool = Field(default=True)
    items: List[Notification]
    pagination: Pagination


class NotificationCountResponse(BaseModel):
    success: bool = Field(default=True)
    count: int = Field(description="Number of notifications")


class NotificationPreferences(BaseModel):
    follow: bool = Field(default=True, description="Notify on new followers")
    like: bool = Field(default=True, description="Notify on review likes")
    comment: bool = Field(default=True, description="Notify on review comments")
    mention: bool = Field(default=True, description="Notify on mentions")
    achievement: bool = Field(default=True, description="Notify on achievements")
    email: bool = Field(default=False, description="Email delivery")
    push: bool = Field(default=False, description="Push delivery")


class NotificationPreferencesUpdate(BaseModel):
    follow: Optional[bool] = None
    like: Optional[bool] = None
    comment: Optional[bool] = None
    mention: Optional[bool] = None
    achievement: Optional[bool] = None
    email: Optional[bool] = None
    push: Optional[bool] = None


class NotificationPreferencesResponse(BaseModel):
    success: bool = Field(default=True)
    preferences: NotificationPreferences
