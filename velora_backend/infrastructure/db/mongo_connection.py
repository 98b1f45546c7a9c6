# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import ReviewFields, UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
REVIEWS_COLLECTION = "reviews"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The client connects lazily, so this never blocks.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=5000,
        socketTimeoutMS=45000,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()[USERS_COLLECTION]


def get_review_collection() -> AsyncIOMotorCollection:
    """
    Get reviews collection from MongoDB

    Returns:
        MongoDB collection for reviews
    """
    return get_database()[REVIEWS_COLLECTION]


async def ensure_indexes(database: Optional[AsyncIOMotorDatabase] = None) -> None:
    """
    Create the indexes the stores rely on.

    The unique email index is the only guard against two concurrent
    registrations with the same email.
    """
    database = database if database is not None else get_database()
    await database[USERS_COLLECTION].create_index(
        [(UserFields.EMAIL, ASCENDING)],
        unique=True,
        name="email_unique",
    )
    await database[REVIEWS_COLLECTION].create_index(
        [(ReviewFields.CREATED_AT, DESCENDING), (ReviewFields.MONGO_ID, DESCENDING)],
        name="created_at_desc",
    )
    logger.info("MongoDB indexes ensured")


def close_database() -> None:
    """Close the MongoDB client and forget the cached instances"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB connection closed")
    _mongo_client = None
    _mongo_database = None
