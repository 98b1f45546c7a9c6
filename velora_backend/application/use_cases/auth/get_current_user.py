# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....core.exceptions import AuthError, MalformedTokenError, TokenExpiredError
from ....core.messages import Messages
from ....core.security import decode_jwt_token
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import CurrentUserResponse, UserResponse

logger = logging.getLogger(__name__)


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user from JWT token"""

    def __init__(self, user_repository: UserRepository, messages: Messages) -> None:
        self.user_repository = user_repository
        self.messages = messages

    async def execute(self, token: Optional[str]) -> CurrentUserResponse:
        """
        Get current user from JWT token

        Args:
            token: Bearer token taken from the Authorization header, if any

        Returns:
            CurrentUserResponse with the public user fields

        Raises:
            AuthError: If the token is missing, expired or invalid, or the user is gone
        """
        if not token:
            raise AuthError(self.messages.authorization_required)

        try:
            payload = decode_jwt_token(token)
        except TokenExpiredError:
            logger.warning("Token rejected: expired")
            raise AuthError(self.messages.token_expired)
        except MalformedTokenError as exception:
            logger.warning(f"Token rejected: {exception}")
            raise AuthError(self.messages.invalid_token)

        user_id: Optional[str] = payload.get("userId")
        if not user_id:
            logger.warning("Token rejected: missing userId claim")
            raise AuthError(self.messages.invalid_token)

        user = await self.user_repository.find_profile_by_id(user_id)
        if user is None:
            logger.warning(f"Token rejected: user {user_id} not found")
            raise AuthError(self.messages.user_not_found)

        return CurrentUserResponse(user=UserResponse.from_user(user))
