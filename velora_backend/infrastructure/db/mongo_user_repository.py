# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...core.exceptions import DuplicateEmailError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_user_collection


# Profile lookups never load the hash or bookkeeping fields
PROFILE_PROJECTION = {
    UserFields.PASSWORD_HASH: 0,
    UserFields.CREATED_AT: 0,
    UserFields.UPDATED_AT: 0,
}


def normalize_email(email: str) -> str:
    """Emails are stored trimmed and lower-cased"""
    return email.strip().lower()


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for, normalized before lookup

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: normalize_email(email)})
        except Exception as e:
            raise RuntimeError(f"Error finding user by email: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        return await self._find_by_object_id(user_id)

    async def find_profile_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID, loading only the public profile fields

        Args:
            user_id: User ID to search for

        Returns:
            User domain model without password hash and timestamps, None if not found
        """
        return await self._find_by_object_id(user_id, projection=PROFILE_PROJECTION)

    async def create(self, user: User) -> User:
        """
        Insert a new user document

        Args:
            user: User domain model to insert (its ID is ignored)

        Returns:
            Created User domain model with ID and timestamps set

        Raises:
            DuplicateEmailError: If the unique email index rejects the insert
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        now = utc_now()
        user_dict[UserFields.CREATED_AT] = now
        user_dict[UserFields.UPDATED_AT] = now

        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            raise DuplicateEmailError(user_dict[UserFields.EMAIL]) from e
        except Exception as e:
            raise RuntimeError(f"Error creating user: {str(e)}") from e

        # insert_one sets _id on the dict it was given
        user_dict[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(user_dict)

    async def _find_by_object_id(self, user_id: str, projection: Optional[dict] = None) -> Optional[User]:
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id}, projection)
        except Exception as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}") from e
        if document is None:
            return None
        return self._document_to_user(document)

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            password_hash=document.get(UserFields.PASSWORD_HASH),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(UserFields.UPDATED_AT)),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document, trimming and normalizing fields

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        if not user.password_hash:
            raise ValueError("Password hash is required")

        return {
            UserFields.NAME: user.name.strip(),
            UserFields.EMAIL: normalize_email(user.email),
            UserFields.PASSWORD_HASH: user.password_hash,
        }
