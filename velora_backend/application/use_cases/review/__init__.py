from .submit_review import SubmitReviewUseCase
from .list_reviews import ListReviewsUseCase

__all__ = [
    "SubmitReviewUseCase",
    "ListReviewsUseCase",
]
