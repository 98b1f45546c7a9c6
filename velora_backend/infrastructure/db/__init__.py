from .mongo_connection import (
    get_database,
    get_user_collection,
    get_review_collection,
    ensure_indexes,
    close_database,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_review_repository import MongoReviewRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "get_review_collection",
    "ensure_indexes",
    "close_database",
    "MongoUserRepository",
    "MongoReviewRepository",
]
