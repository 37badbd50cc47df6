# app/services/review_service.py

import logging
from sqlalchemy.orm import Session
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from app.core.exceptions import NotFoundError, ForbiddenError, InternalError
from app.core.logging_config import log_user_action
from app.models.comment import CommentModel
from app.models.review import ReviewModel
from app.models.review_like import ReviewLikeModel
from app.models.user import UserModel
from app.schemas.review import Review, ReviewCreate
from app.schemas.user import UserProfile

logger = logging.getLogger(__name__)


class ReviewService:

    def __init__(self, db: Session):
        self.db = db

    async def create_review(self, user_id: int, review_data: ReviewCreate) -> Review:
        review_model = ReviewModel(
            user_id=user_id,
            beverage_name=review_data.beverage_name,
            rating=review_data.rating,
            content=review_data.content,
        )
        try:
            self.db.add(review_model)
            self.db.commit()
            self.db.refresh(review_model)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Review creation by user %s failed", user_id)
            raise InternalError()

        log_user_action(logger, user_id, "create_review", f"review_id={review_model.review_id}")
        return self._build_review_response(review_model)

    async def get_review(self, review_id: int) -> Review:
        review_model = self.db.get(ReviewModel, review_id)
        if review_model is None:
            raise NotFoundError("Review not found")
        return self._build_review_response(review_model)

    async def delete_review(self, review_id: int, user_id: int, is_admin: bool = False) -> None:
        """Owner or admin only; likes and comments cascade"""
        review_model = self.db.get(ReviewModel, review_id)
        if review_model is None:
            raise NotFoundError("Review not found")
        if review_model.user_id != user_id and not is_admin:
            raise ForbiddenError("Not authorized to delete this review")

        try:
            self.db.delete(review_model)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Delete of review %s failed", review_id)
            raise InternalError()

        log_user_action(logger, user_id, "delete_review", f"review_id={review_id}")

    def _build_review_response(self, review_model: ReviewModel) -> Review:
        likes_count = self.db.execute(
            select(func.count(ReviewLikeModel.user_id)).where(
                ReviewLikeModel.review_id == review_model.review_id
            )
        ).scalar() or 0
        comments_count = self.db.execute(
            select(func.count(CommentModel.comment_id)).where(
                CommentModel.review_id == review_model.review_id
            )
        ).scalar() or 0
        author = self.db.get(UserModel, review_model.user_id)

        return Review(
            review_id=review_model.review_id,
            user_id=review_model.user_id,
            beverage_name=review_model.beverage_name,
            rating=review_model.rating,
            content=review_model.content,
            likes_count=likes_count,
            comments_count=comments_count,
            created_at=review_model.created_at,
            author=UserProfile.model_validate(author) if author else None,
        )
