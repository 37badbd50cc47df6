# app/api/v1/reviews.py

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.review import ReviewCreate, ReviewResponse
from app.schemas.user import User
from app.services.review_service import ReviewService
from app.core.dependencies import get_current_user

router = APIRouter()


def get_review_service(db: Session = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


@router.post(
    "/",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Write review"
)
async def create_review(
    review_data: ReviewCreate,
    current_user: User = Depends(get_current_user),
    review_service: ReviewService = Depends(get_review_service)
):
    review = await review_service.create_review(current_user.user_id, review_data)
    return ReviewResponse(review=review)


@router.get("/{review_id}", response_model=ReviewResponse, summary="Get review")
async def get_review(
    review_id: int = Path(description="Review ID"),
    review_service: ReviewService = Depends(get_review_service)
):
    review = await review_service.get_review(review_id)
    return ReviewResponse(review=review)


@router.delete(
    "/{review_id}",
    response_model=MessageResponse,
    summary="Delete review",
    description="Delete your own review (admins may delete any). Likes and comments go with it."
)
async def delete_review(
    review_id: int = Path(description="Review ID"),
    current_user: User = Depends(get_current_user),
    review_service: ReviewService = Depends(get_review_service)
):
    await review_service.delete_review(review_id, current_user.user_id, current_user.is_admin)
    return MessageResponse(message="Review deleted")
