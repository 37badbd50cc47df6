# app/api/v1/notifications.py

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.notification import (
    NotificationCountResponse,
    NotificationListResponse,
    NotificationPreferencesResponse,
    NotificationPreferencesUpdate,
)
from app.schemas.user import User
from app.services.notification_service import NotificationService
from app.core.dependencies import get_current_user

router = APIRouter()


def get_notification_service(db: Session = Depends(get_db)) -> NotificationService:
    return NotificationService(db)


@router.get(
    "/",
    response_model=NotificationListResponse,
    summary="My notifications",
    description="Notifications addressed to the current user, newest first."
)
async def list_notifications(
    page: int = Query(default=1, ge=1, description="Page number"),
    limit: int = Query(default=20, ge=1, le=100, description="Page size"),
    unread_only: bool = Query(default=False, description="Only unread notifications"),
    current_user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service)
):
    return await notification_service.list_notifications(
        current_user.user_id, page, limit, unread_only
    )


@router.get("/count", response_model=NotificationCountResponse, summary="Notification count")
async def count_notifications(
    unread_only: bool = Query(default=False, description="Only unread notifications"),
    current_user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service)
):
    count = await notification_service.count_notifications(current_user.user_id, unread_only)
    return NotificationCountResponse(count=count)


@router.get(
    "/preferences",
    response_model=NotificationPreferencesResponse,
    summary="Notification preferences"
)
async def get_preferences(
    current_user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service)
):
    preferences = await notification_service.get_preferences(current_user.user_id)
    return NotificationPreferencesResponse(preferences=preferences)


@router.put(
    "/preferences",
    response_model=NotificationPreferencesResponse,
    summary="Update notification preferences",
    description="Only the flags present in the body are changed."
)
async def update_preferences(
    changes: NotificationPreferencesUpdate,
    current_user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service)
):
    preferences = await notification_service.update_preferences(current_user.user_id, changes)
    return NotificationPreferencesResponse(preferences=preferences)


@router.put("/read-all", response_model=MessageResponse, summary="Mark all as read")
async def mark_all_as_read(
    current_user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service)
):
    await notification_service.mark_all_as_read(current_user.user_id)
    return MessageResponse(message="All notifications marked as read")


@router.put("/{notification_id}/read", response_model=MessageResponse, summary="Mark as read")
async def mark_as_read(
    notification_id: int = Path(description="Notification ID"),
    current_user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service)
):
    await notification_service.mark_as_read(current_user.user_id, notification_id)
    return MessageResponse(message="Notification marked as read")


@router.delete("/{notification_id}", response_model=MessageResponse, summary="Delete notification")
async def delete_notification(
    notification_id: int = Path(description="Notification ID"),
    current_user: User = Depends(get_current_user),
    notification_service: NotificationService = Depends(get_notification_service)
):
    await notification_service.delete_notification(current_user.user_id, notification_id)
    return MessageResponse(message="Notification deleted")
