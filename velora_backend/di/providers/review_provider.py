from typing import TYPE_CHECKING
from ...core.messages import Messages
from ...domain.repositories.review_repository import ReviewRepository
from ...application.use_cases.review.submit_review import SubmitReviewUseCase
from ...application.use_cases.review.list_reviews import ListReviewsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ReviewProvider:
    """Review use case provider - registers the review board use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            SubmitReviewUseCase,
            lambda: SubmitReviewUseCase(
                review_repository=container.get(ReviewRepository),
                messages=container.get(Messages),
            )
        )

        container.register_factory(
            ListReviewsUseCase,
            lambda: ListReviewsUseCase(
                review_repository=container.get(ReviewRepository)
            )
        )
