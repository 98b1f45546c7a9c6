from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .review import (
    SubmitReviewUseCase,
    ListReviewsUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "SubmitReviewUseCase",
    "ListReviewsUseCase",
]
