from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.review import Review


class ReviewCreateRequest(BaseModel):
    """DTO for review submission; rules are checked by the validation layer"""
    author: Optional[str] = None
    text: Optional[str] = None


class ReviewResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    author: str
    text: str
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @classmethod
    def from_review(cls, review: Review) -> "ReviewResponse":
        return cls(
            id=review.id or "",
            author=review.author,
            text=review.text,
            created_at=review.created_at,
        )


class ReviewCreatedResponse(BaseModel):
    success: bool = True
    review: ReviewResponse


class ReviewListResponse(BaseModel):
    success: bool = True
    count: int = 0
    reviews: List[ReviewResponse] = Field(default_factory=list)
