# app/services/notification_service.py

import logging
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, func, update, desc
from sqlalchemy.exc import SQLAlchemyError
from app.core.exceptions import NotFoundError, ForbiddenError, InternalError
from app.models.notification import NotificationModel
from app.models.user import UserModel
from app.schemas.common import Pagination
from app.schemas.notification import (
    Notification,
    NotificationListResponse,
    NotificationPreferences,
    NotificationPreferencesUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_NOTIFICATION_PREFERENCES = NotificationPreferences().model_dump()


class Notifier:
    """Best-effort side channel for social notifications.

    ``notify`` runs after the triggering mutation has committed. It checks the
    recipient's stored preference for the notification type and inserts a row;
    any failure is rolled back and logged, and never reaches the caller.
    """

    def __init__(self, db: Session):
        self.db = db

    def notify(
        self,
        recipient_id: int,
        type: str,
        title: str,
        message: str,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[Notification]:
        try:
            if not self._is_enabled(recipient_id, type):
                return None

            notification = NotificationModel(
                user_id=recipient_id,
                type=type,
                title=title,
                message=message,
                data=data or {},
                is_read=False,
            )
            self.db.add(notification)
            self.db.commit()
            self.db.refresh(notification)

            return Notification.model_validate(notification)

        except Exception:
            self.db.rollback()
            logger.warning(
                "Failed to create %s notification for user %s", type, recipient_id, exc_info=True
            )
            return None

    def _is_enabled(self, recipient_id: int, type: str) -> bool:
        """A type is enabled unless the recipient explicitly turned it off"""
        stmt = select(UserModel.preferences).where(UserModel.user_id == recipient_id)
        row = self.db.execute(stmt).first()
        if row is None:
            return False
        preferences = (row[0] or {}).get("notifications") or {}
        return preferences.get(type.lower()) is not False


class NotificationService:

    def __init__(self, db: Session):
        self.db = db

    async def list_notifications(
        self, user_id: int, page: int = 1, limit: int = 20, unread_only: bool = False
    ) -> NotificationListResponse:
        """Recipient's notifications, newest first"""
        stmt = select(NotificationModel).where(NotificationModel.user_id == user_id)
        if unread_only:
            stmt = stmt.where(NotificationModel.is_read == False)  # noqa: E712

        stmt = (
            stmt.order_by(desc(NotificationModel.created_at), desc(NotificationModel.notification_id))
            .offset((page - 1) * limit)
            .limit(limit)
        )
        rows = self.db.execute(stmt).scalars().all()
        total = await self.count_notifications(user_id, unread_only)

        return NotificationListResponse(
            items=[Notification.model_validate(row) for row in rows],
            pagination=Pagination.build(page, limit, total),
        )

    async def count_notifications(self, user_id: int, unread_only: bool = False) -> int:
        stmt = select(func.count(NotificationModel.notification_id)).where(
            NotificationModel.user_id == user_id
        )
        if unread_only:
            stmt = stmt.where(NotificationModel.is_read == False)  # noqa: E712
        return self.db.execute(stmt).scalar() or 0

    async def mark_as_read(self, user_id: int, notification_id: int) -> None:
        notification = self._get_owned(user_id, notification_id)
        try:
            notification.is_read = True
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to mark notification %s as read", notification_id)
            raise InternalError()

    async def mark_all_as_read(self, user_id: int) -> int:
        try:
            stmt = (
                update(NotificationModel)
                .where(NotificationModel.user_id == user_id, NotificationModel.is_read == False)  # noqa: E712
                .values(is_read=True)
                .execution_options(synchronize_session="fetch")
            )
            result = self.db.execute(stmt)
            self.db.commit()
            return result.rowcount or 0
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to mark notifications of user %s as read", user_id)
            raise InternalError()

    async def delete_notification(self, user_id: int, notification_id: int) -> None:
        notification = self._get_owned(user_id, notification_id, action="delete")
        try:
            self.db.delete(notification)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to delete notification %s", notification_id)
            raise InternalError()

    async def get_preferences(self, user_id: int) -> NotificationPreferences:
        user = self._get_user(user_id)
        stored = (user.preferences or {}).get("notifications") or {}
        return NotificationPreferences(**{**DEFAULT_NOTIFICATION_PREFERENCES, **stored})

    async def update_preferences(
        self, user_id: int, changes: NotificationPreferencesUpdate
    ) -> NotificationPreferences:
        """Merge the given flags into the stored preference map"""
        user = self._get_user(user_id)
        current = dict(user.preferences or {})
        notifications = {
            **(current.get("notifications") or {}),
            **changes.model_dump(exclude_none=True),
        }
        # reassign so the JSON column is flagged dirty
        user.preferences = {**current, "notifications": notifications}
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to update notification preferences of user %s", user_id)
            raise InternalError()

        return NotificationPreferences(**{**DEFAULT_NOTIFICATION_PREFERENCES, **notifications})

    def _get_owned(self, user_id: int, notification_id: int, action: str = "modify"):
        notification = self.db.get(NotificationModel, notification_id)
        if notification is None:
            raise NotFoundError("Notification not found")
        if notification.user_id != user_id:
            raise ForbiddenError(f"Not authorized to {action} this notification")
        return notification

    def _get_user(self, user_id: int) -> UserModel:
        user = self.db.get(UserModel, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
