# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import AuthResponse, UserLoginRequest, UserRegistrationRequest
from ...application.dto.user_dto import CurrentUserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...core.messages import Messages
from ...di.container import get_container
from ..error_handlers import unexpected_errors_as
from .dependencies import get_bearer_token


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> AuthResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        AuthResponse with a session token and the created user
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    with unexpected_errors_as(container.get(Messages).register_failed, "Register"):
        return await register_use_case.execute(request)


@router.post("/login", response_model=AuthResponse)
async def login_user(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        AuthResponse with a session token and the user
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    with unexpected_errors_as(container.get(Messages).login_failed, "Login"):
        return await login_use_case.execute(request)


@router.get("/protected", response_model=CurrentUserResponse)
async def get_protected(token: Optional[str] = Depends(get_bearer_token)) -> CurrentUserResponse:
    """
    Verify the bearer token and return the user it belongs to

    Args:
        token: Bearer token from the Authorization header (from dependency)

    Returns:
        CurrentUserResponse with user information
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    with unexpected_errors_as(container.get(Messages).token_check_failed, "Protected route"):
        return await get_current_user_use_case.execute(token)
