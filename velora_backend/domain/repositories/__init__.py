from .user_repository import UserRepository
from .review_repository import ReviewRepository

__all__ = ["UserRepository", "ReviewRepository"]
