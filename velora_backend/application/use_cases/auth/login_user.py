# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.exceptions import AuthError, ValidationError
from ....core.messages import Messages
from ....core.security import create_jwt_token, verify_password
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import AuthResponse, UserLoginRequest
from ...dto.user_dto import UserResponse
from ...validation import validate_login

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository, messages: Messages) -> None:
        self.user_repository = user_repository
        self.messages = messages

    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token

        Unknown emails and wrong passwords fail with the same error, so the
        response does not reveal which emails are registered.

        Args:
            request: Login request with email and password

        Returns:
            AuthResponse with a session token and the public user fields

        Raises:
            ValidationError: If email or password is missing
            AuthError: If the credentials do not match (status 400)
        """
        error = validate_login(request, self.messages)
        if error:
            logger.warning(f"Login rejected: {error}")
            raise ValidationError(error)

        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            logger.warning("Login failed: unknown email")
            raise AuthError(self.messages.invalid_credentials, status_code=400)

        is_match = await asyncio.to_thread(verify_password, request.password, user.password_hash or "")
        if not is_match:
            logger.warning(f"Login failed: wrong password for user {user.id}")
            raise AuthError(self.messages.invalid_credentials, status_code=400)

        token = create_jwt_token(user.to_claims())
        logger.info(f"User logged in: {user.id}")

        return AuthResponse(
            token=token,
            user=UserResponse.from_user(user),
        )
