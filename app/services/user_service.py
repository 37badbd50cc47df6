# app/services/user_service.py

import logging
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from app.core.auth import get_password_hash, verify_password
from app.core.exceptions import ConflictError, NotFoundError, InternalError
from app.core.logging_config import log_user_action
from app.models.user import UserModel
from app.models.user_follow import UserFollowModel
from app.models.review import ReviewModel
from app.schemas.user import User, UserCreate, UserDetail

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session):
        self.db = db

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        user_model = self.db.get(UserModel, user_id)
        return User.model_validate(user_model) if user_model else None

    async def create_user(self, user_data: UserCreate) -> User:
        """Register a user with a hashed password"""
        email = user_data.email.lower()

        stmt = select(UserModel).where(
            or_(UserModel.username == user_data.username, UserModel.email == email)
        )
        existing = self.db.execute(stmt).scalars().first()
        if existing is not None:
            if existing.username == user_data.username:
                raise ConflictError("Username already taken")
            raise ConflictError("Email already registered")

        user_model = UserModel(
            username=user_data.username,
            email=email,
            password_hash=get_password_hash(user_data.password),
            display_name=user_data.display_name,
        )
        try:
            self.db.add(user_model)
            self.db.commit()
            self.db.refresh(user_model)
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("Username or email already registered")
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("User registration failed for %s", user_data.username)
            raise InternalError()

        log_user_action(logger, user_model.user_id, "register")
        return User.model_validate(user_model)

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email.lower())
        user_model = self.db.execute(stmt).scalar_one_or_none()

        if (
            not user_model
            or not user_model.is_active
            or not verify_password(password, user_model.password_hash)
        ):
            return None

        user_model.last_login = datetime.now(timezone.utc).replace(tzinfo=None)
        self.db.commit()

        return User.model_validate(user_model)

    async def get_user_detail(
        self, user_id: int, current_user: Optional[User] = None
    ) -> Optional[UserDetail]:
        """Profile with social counters; email only for the owner"""
        user_model = self.db.get(UserModel, user_id)
        if not user_model:
            return None

        is_owner = current_user is not None and current_user.user_id == user_id

        is_following = False
        if current_user and not is_owner:
            stmt = select(UserFollowModel).where(
                UserFollowModel.follower_id == current_user.user_id,
                UserFollowModel.following_id == user_id,
            )
            is_following = self.db.execute(stmt).scalar_one_or_none() is not None

        return UserDetail(
            user_id=user_model.user_id,
            username=user_model.username,
            email=user_model.email if is_owner else None,
            display_name=user_model.display_name,
            avatar_url=user_model.avatar_url,
            bio=user_model.bio,
            created_at=user_model.created_at,
            followers_count=self._count(
                UserFollowModel.follower_id, UserFollowModel.following_id == user_id
            ),
            following_count=self._count(
                UserFollowModel.following_id, UserFollowModel.follower_id == user_id
            ),
            reviews_count=self._count(ReviewModel.review_id, ReviewModel.user_id == user_id),
            is_following=is_following,
        )

    async def delete_user(self, user_id: int) -> None:
        """Delete an account; follows, likes, reviews and comments cascade"""
        user_model = self.db.get(UserModel, user_id)
        if not user_model:
            raise NotFoundError("User not found")

        try:
            self.db.delete(user_model)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Delete of user %s failed", user_id)
            raise InternalError()

        log_user_action(logger, user_id, "delete_account")

    def _count(self, column, condition) -> int:
        return self.db.execute(select(func.count(column)).where(condition)).scalar() or 0
