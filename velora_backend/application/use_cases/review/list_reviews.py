# Local application imports
from ....domain.repositories.review_repository import ReviewRepository
from ...dto.review_dto import ReviewListResponse, ReviewResponse


REVIEW_LIST_LIMIT = 50


class ListReviewsUseCase:
    """Use case for listing the most recent reviews"""

    def __init__(self, review_repository: ReviewRepository, limit: int = REVIEW_LIST_LIMIT) -> None:
        self.review_repository = review_repository
        self.limit = limit

    async def execute(self) -> ReviewListResponse:
        """
        List the newest reviews, newest first

        Returns:
            ReviewListResponse with the reviews and their count
        """
        reviews = await self.review_repository.list_recent(self.limit)
        items = [ReviewResponse.from_review(review) for review in reviews]
        return ReviewListResponse(count=len(items), reviews=items)
