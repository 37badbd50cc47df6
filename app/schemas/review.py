# app/schemas/review.py

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from app.schemas.user import UserProfile


class Review(BaseModel):
    review_id: int = Field(description="Review ID")
    user_id: int = Field(description="Author ID")
    beverage_name: str = Field(description="Reviewed beverage")
    rating: Optional[Decimal] = Field(default=None, description="Rating (0.0 ~ 5.0)")
    content: Optional[str] = Field(default=None, description="Review body")
    likes_count: int = Field(default=0, description="Number of likes")
    comments_count: int = Field(default=0, description="Number of comments")
    created_at: Optional[datetime] = Field(default=None, description="Created at")
    author: Optional[UserProfile] = Field(default=None, description="Author projection")


class ReviewCreate(BaseModel):
    beverage_name: str = Field(description="Reviewed beverage", min_length=1, max_length=255)
    rating: Optional[Decimal] = Field(default=None, description="Rating (0.0 ~ 5.0)", ge=0, le=5)
    content: Optional[str] = Field(default=None, description="Review body", max_length=5000)


class ReviewResponse(BaseModel):
    success: bool = Field(default=True)
    review: Review
