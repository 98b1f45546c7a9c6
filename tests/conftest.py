"""
Shared pytest fixtures for velora-backend tests.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from velora_backend.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from velora_backend.application.use_cases.auth.login_user import LoginUserUseCase
from velora_backend.application.use_cases.auth.register_user import RegisterUserUseCase
from velora_backend.core.messages import EN, Messages
from velora_backend.di.base_container import BaseContainer
from velora_backend.di.providers import AuthProvider, ReviewProvider
from velora_backend.domain.repositories.review_repository import ReviewRepository
from velora_backend.domain.repositories.user_repository import UserRepository
# Build the app with real settings before any fixture patches get_settings
from velora_backend.main import app

from tests.fakes import InMemoryReviewRepository, InMemoryUserRepository


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60
    mock.bcrypt_rounds = 4  # bcrypt minimum, keeps tests fast
    mock.locale = "en"
    mock.environment = "test"
    mock.expose_error_details = True
    mock.log_level = "INFO"
    mock.cors_allowed_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("velora_backend.core.config.get_settings", return_value=mock), patch(
        "velora_backend.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def messages() -> Messages:
    return EN


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_review_repo():
    """Mock ReviewRepository with async methods."""
    return AsyncMock(spec=ReviewRepository)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def review_repository() -> InMemoryReviewRepository:
    return InMemoryReviewRepository()


@pytest.fixture
def register_use_case(user_repository, messages) -> RegisterUserUseCase:
    return RegisterUserUseCase(user_repository, messages)


@pytest.fixture
def login_use_case(user_repository, messages) -> LoginUserUseCase:
    return LoginUserUseCase(user_repository, messages)


@pytest.fixture
def current_user_use_case(user_repository, messages) -> GetCurrentUserUseCase:
    return GetCurrentUserUseCase(user_repository, messages)


@pytest.fixture
def container(mock_settings, user_repository, review_repository, messages) -> BaseContainer:
    """Container wired like the real one, but backed by in-memory repositories."""
    container = BaseContainer()
    container.register_singleton(Messages, messages)
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(ReviewRepository, review_repository)
    AuthProvider.register(container)
    ReviewProvider.register(container)
    return container


@pytest.fixture
def client(container):
    """TestClient running the full app lifespan without touching MongoDB."""
    with patch("velora_backend.di.container._container", container), patch(
        "velora_backend.main.ensure_indexes", new=AsyncMock()
    ), patch("velora_backend.main.close_database"):
        with TestClient(app) as c:
            yield c
