# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.exceptions import DuplicateEmailError, ValidationError
from ....core.messages import Messages
from ....core.security import create_jwt_token, hash_password
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import AuthResponse, UserRegistrationRequest
from ...dto.user_dto import UserResponse
from ...validation import validate_registration

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user and issuing their first token"""

    def __init__(self, user_repository: UserRepository, messages: Messages) -> None:
        self.user_repository = user_repository
        self.messages = messages

    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user

        Args:
            request: Registration request with name, email and password

        Returns:
            AuthResponse with a session token and the public user fields

        Raises:
            ValidationError: If a field is invalid or the email is already registered
        """
        error = validate_registration(request, self.messages)
        if error:
            logger.warning(f"Registration rejected: {error}")
            raise ValidationError(error)

        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            logger.warning(f"Registration rejected: email already registered ({existing_user.email})")
            raise ValidationError(self.messages.user_exists)

        # bcrypt is CPU bound, keep it off the event loop
        password_hash = await asyncio.to_thread(hash_password, request.password)

        new_user = User(
            id=None,  # Will be set by repository
            name=request.name,
            email=request.email,
            password_hash=password_hash,
        )

        try:
            saved_user = await self.user_repository.create(new_user)
        except DuplicateEmailError as exception:
            # Lost a race with a concurrent registration for the same email
            logger.warning(f"Registration rejected by unique index: {exception.email}")
            raise ValidationError(self.messages.user_exists) from exception

        token = create_jwt_token(saved_user.to_claims())
        logger.info(f"User registered: {saved_user.id}")

        return AuthResponse(
            token=token,
            user=UserResponse.from_user(saved_user),
        )
