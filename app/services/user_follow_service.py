# app/services/user_follow_service.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, func, and_, desc
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from app.core.exceptions import SelfActionError, NotFoundError, ConflictError, InternalError
from app.core.logging_config import log_user_action
from app.models.user_follow import UserFollowModel
from app.models.user import UserModel
from app.schemas.common import Pagination
from app.schemas.user_follow import FollowStats, FollowUser, FollowListResponse
from app.services.notification_service import Notifier

logger = logging.getLogger(__name__)


class UserFollowService:

    def __init__(self, db: Session, notifier: Optional[Notifier] = None):
        self.db = db
        self.notifier = notifier or Notifier(db)

    async def follow_user(self, follower_id: int, following_id: int) -> str:
        """Follow a user; returns the acknowledgement message"""
        if follower_id == following_id:
            raise SelfActionError("Cannot follow yourself")

        target = self.db.get(UserModel, following_id)
        if target is None:
            raise NotFoundError("User not found")

        if self._is_following_with_db(follower_id, following_id):
            raise ConflictError("Already following this user")

        try:
            self.db.add(UserFollowModel(follower_id=follower_id, following_id=following_id))
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # a concurrent request either created the same edge or removed the target
            if self._get_follow(follower_id, following_id) is not None:
                raise ConflictError("Already following this user")
            if not self._user_exists(following_id):
                raise NotFoundError("User not found")
            logger.exception(
                "Follow %s -> %s violated an integrity constraint", follower_id, following_id
            )
            raise InternalError()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Follow %s -> %s failed", follower_id, following_id)
            raise InternalError()

        message = f"User followed successfully: {target.public_name}"
        log_user_action(logger, follower_id, "follow", f"following_id={following_id}")

        follower = self.db.get(UserModel, follower_id)
        follower_name = follower.public_name if follower else "Someone"
        self.notifier.notify(
            following_id,
            "follow",
            "New follower",
            f"{follower_name} started following you",
            {
                "follower_id": follower_id,
                "follower_username": follower.username if follower else None,
                "follower_display_name": follower.display_name if follower else None,
            },
        )

        return message

    async def unfollow_user(self, follower_id: int, following_id: int) -> str:
        """Unfollow a user; a missing edge is a conflict, not a no-op"""
        follow = self._get_follow(follower_id, following_id)
        if follow is None:
            raise ConflictError("Not following this user")

        try:
            self.db.delete(follow)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Unfollow %s -> %s failed", follower_id, following_id)
            raise InternalError()

        log_user_action(logger, follower_id, "unfollow", f"following_id={following_id}")
        return "User unfollowed successfully"

    async def get_follow_stats(self, user_id: int) -> FollowStats:
        """Follower / following counters"""
        self._ensure_user(user_id)

        return FollowStats(
            user_id=user_id,
            followers_count=self.get_followers_count(user_id),
            following_count=self.get_following_count(user_id),
        )

    async def get_followers(
        self, user_id: int, current_user_id: Optional[int] = None, page: int = 1, limit: int = 20
    ) -> FollowListResponse:
        """Users following ``user_id``, newest edge first"""
        self._ensure_user(user_id)
        stmt = (
            select(
                UserModel.user_id,
                UserModel.username,
                UserModel.display_name,
                UserModel.avatar_url,
                UserModel.bio,
                UserFollowModel.created_at,
            )
            .join(UserFollowModel, UserModel.user_id == UserFollowModel.follower_id)
            .where(UserFollowModel.following_id == user_id)
            .order_by(desc(UserFollowModel.created_at), desc(UserModel.user_id))
            .offset((page - 1) * limit)
            .limit(limit)
        )
        rows = self.db.execute(stmt).all()

        items = self._build_follow_users(rows, current_user_id)
        total = self.get_followers_count(user_id)

        return FollowListResponse(items=items, pagination=Pagination.build(page, limit, total))

    async def get_following(
        self, user_id: int, current_user_id: Optional[int] = None, page: int = 1, limit: int = 20
    ) -> FollowListResponse:
        """Users ``user_id`` follows, newest edge first"""
        self._ensure_user(user_id)
        stmt = (
            select(
                UserModel.user_id,
                UserModel.username,
                UserModel.display_name,
                UserModel.avatar_url,
                UserModel.bio,
                UserFollowModel.created_at,
            )
            .join(UserFollowModel, UserModel.user_id == UserFollowModel.following_id)
            .where(UserFollowModel.follower_id == user_id)
            .order_by(desc(UserFollowModel.created_at), desc(UserModel.user_id))
            .offset((page - 1) * limit)
            .limit(limit)
        )
        rows = self.db.execute(stmt).all()

        items = self._build_follow_users(rows, current_user_id)
        total = self.get_following_count(user_id)

        return FollowListResponse(items=items, pagination=Pagination.build(page, limit, total))

    async def is_following(self, follower_id: int, following_id: int) -> bool:
        return self._is_following_with_db(follower_id, following_id)

    def get_followers_count(self, user_id: int) -> int:
        stmt = select(func.count(UserFollowModel.follower_id)).where(
            UserFollowModel.following_id == user_id
        )
        return self.db.execute(stmt).scalar() or 0

    def get_following_count(self, user_id: int) -> int:
        stmt = select(func.count(UserFollowModel.following_id)).where(
            UserFollowModel.follower_id == user_id
        )
        return self.db.execute(stmt).scalar() or 0

    def _ensure_user(self, user_id: int) -> None:
        if self.db.get(UserModel, user_id) is None:
            raise NotFoundError("User not found")

    def _user_exists(self, user_id: int) -> bool:
        stmt = select(UserModel.user_id).where(UserModel.user_id == user_id)
        return self.db.execute(stmt).first() is not None

    def _build_follow_users(self, rows, current_user_id: Optional[int]) -> List[FollowUser]:
        # one query for the viewer's edges instead of one per row
        listed_ids = [row[0] for row in rows]
        following_ids_set = set()
        if current_user_id and listed_ids:
            following_ids_set = self._get_following_ids_set(current_user_id, listed_ids)

        return [
            FollowUser(
                user_id=user_id_val,
                username=username,
                display_name=display_name,
                avatar_url=avatar_url,
                bio=bio,
                is_following=user_id_val in following_ids_set,
                followed_at=created_at,
            )
            for user_id_val, username, display_name, avatar_url, bio, created_at in rows
        ]

    def _get_follow(self, follower_id: int, following_id: int) -> Optional[UserFollowModel]:
        stmt = select(UserFollowModel).where(
            and_(
                UserFollowModel.follower_id == follower_id,
                UserFollowModel.following_id == following_id,
            )
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def _is_following_with_db(self, follower_id: int, following_id: int) -> bool:
        return self._get_follow(follower_id, following_id) is not None

    def _get_following_ids_set(self, current_user_id: int, target_user_ids: List[int]) -> set:
        """Subset of ``target_user_ids`` the viewer follows"""
        stmt = select(UserFollowModel.following_id).where(
            and_(
                UserFollowModel.follower_id == current_user_id,
                UserFollowModel.following_id.in_(target_user_ids),
            )
        )
        return {row[0] for row in self.db.execute(stmt).all()}
