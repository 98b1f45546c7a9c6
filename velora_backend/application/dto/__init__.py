from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from .user_dto import UserResponse, CurrentUserResponse
from .review_dto import (
    ReviewCreateRequest,
    ReviewResponse,
    ReviewCreatedResponse,
    ReviewListResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "UserResponse",
    "CurrentUserResponse",
    "ReviewCreateRequest",
    "ReviewResponse",
    "ReviewCreatedResponse",
    "ReviewListResponse",
]
