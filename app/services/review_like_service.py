# app/services/review_like_service.py

import logging
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, func, and_, desc
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from app.core.exceptions import NotFoundError, ConflictError, InternalError
from app.core.logging_config import log_user_action
from app.models.review import ReviewModel
from app.models.review_like import ReviewLikeModel
from app.models.user import UserModel
from app.schemas.common import Pagination
from app.schemas.review_like import LikeUser, LikeListResponse
from app.services.notification_service import Notifier

logger = logging.getLogger(__name__)


class ReviewLikeService:

    def __init__(self, db: Session, notifier: Optional[Notifier] = None):
        self.db = db
        self.notifier = notifier or Notifier(db)

    async def like_review(self, user_id: int, review_id: int) -> str:
        review = self.db.get(ReviewModel, review_id)
        if review is None:
            raise NotFoundError("Review not found")

        if self._get_like(user_id, review_id) is not None:
            raise ConflictError("Already liked this review")

        try:
            self.db.add(ReviewLikeModel(user_id=user_id, review_id=review_id))
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # a concurrent request either created the same like or removed the review
            if self._like_exists(user_id, review_id):
                raise ConflictError("Already liked this review")
            if not self._review_exists(review_id):
                raise NotFoundError("Review not found")
            logger.exception(
                "Like of review %s by user %s violated an integrity constraint", review_id, user_id
            )
            raise InternalError()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Like of review %s by user %s failed", review_id, user_id)
            raise InternalError()

        log_user_action(logger, user_id, "like", f"review_id={review_id}")

        # self-likes never notify
        if review.user_id != user_id:
            liker = self.db.get(UserModel, user_id)
            liker_name = liker.public_name if liker else "Someone"
            self.notifier.notify(
                review.user_id,
                "like",
                "New like",
                f"{liker_name} liked your review of {review.beverage_name}",
                {
                    "review_id": review_id,
                    "liker_id": user_id,
                    "liker_username": liker.username if liker else None,
                },
            )

        return "Review liked successfully"

    async def unlike_review(self, user_id: int, review_id: int) -> str:
        like = self._get_like(user_id, review_id)
        if like is None:
            raise ConflictError("Not liked this review")

        try:
            self.db.delete(like)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Unlike of review %s by user %s failed", review_id, user_id)
            raise InternalError()

        log_user_action(logger, user_id, "unlike", f"review_id={review_id}")
        return "Review unliked successfully"

    async def is_liked(self, user_id: int, review_id: int) -> bool:
        return self._get_like(user_id, review_id) is not None

    async def get_review_likes(
        self, review_id: int, page: int = 1, limit: int = 20
    ) -> LikeListResponse:
        """Users who liked a review, newest like first"""
        if self.db.get(ReviewModel, review_id) is None:
            raise NotFoundError("Review not found")

        stmt = (
            select(
                UserModel.user_id,
                UserModel.username,
                UserModel.display_name,
                UserModel.avatar_url,
                ReviewLikeModel.created_at,
            )
            .join(ReviewLikeModel, UserModel.user_id == ReviewLikeModel.user_id)
            .where(ReviewLikeModel.review_id == review_id)
            .order_by(desc(ReviewLikeModel.created_at), desc(UserModel.user_id))
            .offset((page - 1) * limit)
            .limit(limit)
        )
        rows = self.db.execute(stmt).all()

        items = [
            LikeUser(
                user_id=liker_id,
                username=username,
                display_name=display_name,
                avatar_url=avatar_url,
                liked_at=created_at,
            )
            for liker_id, username, display_name, avatar_url, created_at in rows
        ]
        total = self.get_like_count(review_id)

        return LikeListResponse(items=items, pagination=Pagination.build(page, limit, total))

    def get_like_count(self, review_id: int) -> int:
        stmt = select(func.count(ReviewLikeModel.user_id)).where(
            ReviewLikeModel.review_id == review_id
        )
        return self.db.execute(stmt).scalar() or 0

    def _like_exists(self, user_id: int, review_id: int) -> bool:
        stmt = select(ReviewLikeModel.user_id).where(
            ReviewLikeModel.user_id == user_id, ReviewLikeModel.review_id == review_id
        )
        return self.db.execute(stmt).first() is not None

    def _review_exists(self, review_id: int) -> bool:
        stmt = select(ReviewModel.review_id).where(ReviewModel.review_id == review_id)
        return self.db.execute(stmt).first() is not None

    def _get_like(self, user_id: int, review_id: int) -> Optional[ReviewLikeModel]:
        stmt = select(ReviewLikeModel).where(
            and_(ReviewLikeModel.user_id == user_id, ReviewLikeModel.review_id == review_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()
