# Standard library imports
import logging

# Local application imports
from ....core.exceptions import ValidationError
from ....core.messages import Messages
from ....domain.models.review import Review
from ....domain.repositories.review_repository import ReviewRepository
from ...dto.review_dto import ReviewCreateRequest, ReviewCreatedResponse, ReviewResponse
from ...validation import validate_review

logger = logging.getLogger(__name__)


class SubmitReviewUseCase:
    """Use case for publishing a new review"""

    def __init__(self, review_repository: ReviewRepository, messages: Messages) -> None:
        self.review_repository = review_repository
        self.messages = messages

    async def execute(self, request: ReviewCreateRequest) -> ReviewCreatedResponse:
        """
        Validate and store a review

        Args:
            request: Review submission with author and text

        Returns:
            ReviewCreatedResponse echoing the stored review with its ID and timestamp

        Raises:
            ValidationError: If author or text is missing or too short
        """
        error = validate_review(request, self.messages)
        if error:
            logger.warning(f"Review rejected: {error}")
            raise ValidationError(error)

        saved_review = await self.review_repository.create(
            Review(id=None, author=request.author, text=request.text)
        )
        logger.info(f"Review created: {saved_review.id}")

        return ReviewCreatedResponse(review=ReviewResponse.from_review(saved_review))
