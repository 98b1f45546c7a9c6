"""
Reviews API: public review board (list newest, submit).
"""
# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.review_dto import (
    ReviewCreateRequest,
    ReviewCreatedResponse,
    ReviewListResponse,
)
from ...application.use_cases.review.list_reviews import ListReviewsUseCase
from ...application.use_cases.review.submit_review import SubmitReviewUseCase
from ...core.messages import Messages
from ...di.container import get_container
from ..error_handlers import unexpected_errors_as


router = APIRouter(tags=["reviews"])


@router.get("", response_model=ReviewListResponse)
async def list_reviews() -> ReviewListResponse:
    """List the 50 most recent reviews, newest first"""
    container = get_container()
    list_use_case = container.get(ListReviewsUseCase)

    with unexpected_errors_as(container.get(Messages).reviews_load_failed, "Get reviews"):
        return await list_use_case.execute()


@router.post("", response_model=ReviewCreatedResponse, status_code=status.HTTP_201_CREATED)
async def submit_review(request: ReviewCreateRequest) -> ReviewCreatedResponse:
    """Publish a new review"""
    container = get_container()
    submit_use_case = container.get(SubmitReviewUseCase)

    with unexpected_errors_as(container.get(Messages).review_save_failed, "Submit review"):
        return await submit_use_case.execute(request)
