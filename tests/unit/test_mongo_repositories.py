"""
Unit tests for the MongoDB stores, using mocked Motor collections.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from velora_backend.core.exceptions import DuplicateEmailError
from velora_backend.domain.models.review import Review
from velora_backend.domain.models.user import User
from velora_backend.infrastructure.db.mongo_review_repository import MongoReviewRepository
from velora_backend.infrastructure.db.mongo_user_repository import (
    PROFILE_PROJECTION,
    MongoUserRepository,
)


class AsyncCursor:
    """Stand-in for a Motor cursor: supports async iteration over fixed documents."""

    def __init__(self, documents):
        self._documents = list(documents)

    def __aiter__(self):
        self._iterator = iter(self._documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration


@pytest.fixture
def user_collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    return collection


@pytest.fixture
def review_collection():
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    return collection


class TestMongoUserRepository:
    @pytest.mark.asyncio
    async def test_find_by_email_normalizes_lookup(self, user_collection):
        object_id = ObjectId()
        user_collection.find_one.return_value = {
            "_id": object_id,
            "name": "Alice",
            "email": "alice@example.com",
            "password_hash": "$2b$10$hash",
            "created_at": datetime(2025, 1, 1),
        }

        repo = MongoUserRepository(user_collection=user_collection)
        user = await repo.find_by_email("  Alice@Example.com ")

        user_collection.find_one.assert_awaited_once_with({"email": "alice@example.com"})
        assert user.id == str(object_id)
        assert user.password_hash == "$2b$10$hash"
        assert user.created_at.tzinfo == timezone.utc

    @pytest.mark.asyncio
    async def test_find_by_email_not_found(self, user_collection):
        user_collection.find_one.return_value = None
        repo = MongoUserRepository(user_collection=user_collection)
        assert await repo.find_by_email("nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_find_by_id_invalid_object_id(self, user_collection):
        repo = MongoUserRepository(user_collection=user_collection)
        assert await repo.find_by_id("not-an-object-id") is None
        user_collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_profile_excludes_hash_and_timestamps(self, user_collection):
        object_id = ObjectId()
        user_collection.find_one.return_value = {
            "_id": object_id,
            "name": "Alice",
            "email": "alice@example.com",
        }

        repo = MongoUserRepository(user_collection=user_collection)
        user = await repo.find_profile_by_id(str(object_id))

        user_collection.find_one.assert_awaited_once_with({"_id": object_id}, PROFILE_PROJECTION)
        assert user.password_hash is None
        assert user.created_at is None

    @pytest.mark.asyncio
    async def test_create_trims_and_normalizes(self, user_collection):
        object_id = ObjectId()
        user_collection.insert_one.return_value = MagicMock(inserted_id=object_id)

        repo = MongoUserRepository(user_collection=user_collection)
        saved = await repo.create(
            User(id=None, name="  Alice ", email=" Alice@Example.COM", password_hash="$2b$10$hash")
        )

        document = user_collection.insert_one.await_args.args[0]
        assert document["name"] == "Alice"
        assert document["email"] == "alice@example.com"
        assert document["password_hash"] == "$2b$10$hash"
        assert document["created_at"] == document["updated_at"]
        assert saved.id == str(object_id)
        assert saved.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_create_duplicate_key_raises_duplicate_email(self, user_collection):
        user_collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error")

        repo = MongoUserRepository(user_collection=user_collection)
        with pytest.raises(DuplicateEmailError) as exc_info:
            await repo.create(User(id=None, name="Alice", email="alice@example.com", password_hash="hash"))
        assert exc_info.value.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_create_other_failures_raise_runtime_error(self, user_collection):
        user_collection.insert_one.side_effect = Exception("connection refused")

        repo = MongoUserRepository(user_collection=user_collection)
        with pytest.raises(RuntimeError, match="Error creating user"):
            await repo.create(User(id=None, name="Alice", email="alice@example.com", password_hash="hash"))

    @pytest.mark.asyncio
    async def test_create_requires_hash(self, user_collection):
        repo = MongoUserRepository(user_collection=user_collection)
        with pytest.raises(ValueError, match="Password hash"):
            await repo.create(User(id=None, name="Alice", email="alice@example.com"))


class TestMongoReviewRepository:
    @pytest.mark.asyncio
    async def test_create_trims_and_sets_timestamp(self, review_collection):
        object_id = ObjectId()
        review_collection.insert_one.return_value = MagicMock(inserted_id=object_id)

        repo = MongoReviewRepository(review_collection=review_collection)
        saved = await repo.create(Review(id=None, author=" Jo ", text=" 1234567890 "))

        document = review_collection.insert_one.await_args.args[0]
        assert document["author"] == "Jo"
        assert document["text"] == "1234567890"
        assert isinstance(document["created_at"], datetime)
        assert saved.id == str(object_id)
        assert saved.created_at == document["created_at"]

    @pytest.mark.asyncio
    async def test_list_recent_sorts_newest_first_and_limits(self, review_collection):
        documents = [
            {"_id": ObjectId(), "author": "Jo", "text": "Second review", "created_at": datetime(2025, 1, 2)},
            {"_id": ObjectId(), "author": "Al", "text": "First review!", "created_at": datetime(2025, 1, 1)},
        ]
        cursor = MagicMock()
        cursor.sort.return_value.limit.return_value = AsyncCursor(documents)
        review_collection.find.return_value = cursor

        repo = MongoReviewRepository(review_collection=review_collection)
        reviews = await repo.list_recent(50)

        review_collection.find.assert_called_once_with({})
        cursor.sort.assert_called_once_with([("created_at", -1), ("_id", -1)])
        cursor.sort.return_value.limit.assert_called_once_with(50)
        assert [review.author for review in reviews] == ["Jo", "Al"]
        assert all(review.created_at.tzinfo == timezone.utc for review in reviews)

    @pytest.mark.asyncio
    async def test_list_recent_wraps_driver_errors(self, review_collection):
        review_collection.find.side_effect = Exception("server selection timeout")
        repo = MongoReviewRepository(review_collection=review_collection)
        with pytest.raises(RuntimeError, match="Error listing reviews"):
            await repo.list_recent(50)


class TestEnsureIndexes:
    @pytest.mark.asyncio
    async def test_creates_unique_email_and_listing_indexes(self):
        from velora_backend.infrastructure.db.mongo_connection import ensure_indexes

        collections = {"users": MagicMock(), "reviews": MagicMock()}
        for collection in collections.values():
            collection.create_index = AsyncMock()
        database = MagicMock()
        database.__getitem__.side_effect = collections.__getitem__

        await ensure_indexes(database)

        collections["users"].create_index.assert_awaited_once_with(
            [("email", 1)], unique=True, name="email_unique"
        )
        collections["reviews"].create_index.assert_awaited_once_with(
            [("created_at", -1), ("_id", -1)], name="created_at_desc"
        )
