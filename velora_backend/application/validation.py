"""
Request validation rules.

Each validator is a pure function: it takes a request DTO and the message
catalog and returns None when the payload is valid, or the message of the
first rule that fails. Length checks look at the value exactly as the client
sent it; the stores trim values only when they are written.
"""

# Standard library imports
import re
from typing import Optional

# Local application imports
from ..core.messages import Messages
from .dto.auth_dto import UserLoginRequest, UserRegistrationRequest
from .dto.review_dto import ReviewCreateRequest


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_PASSWORD_LENGTH = 6
MIN_AUTHOR_LENGTH = 2
MIN_REVIEW_TEXT_LENGTH = 10


def _is_blank(value: Optional[str]) -> bool:
    # Whitespace-only values would be trimmed to empty strings by the stores
    return not value or not value.strip()


def validate_registration(request: UserRegistrationRequest, messages: Messages) -> Optional[str]:
    if _is_blank(request.name) or _is_blank(request.email) or _is_blank(request.password):
        return messages.register_fields_required
    if len(request.password) < MIN_PASSWORD_LENGTH:
        return messages.password_too_short
    if not EMAIL_PATTERN.match(request.email):
        return messages.invalid_email
    return None


def validate_login(request: UserLoginRequest, messages: Messages) -> Optional[str]:
    if _is_blank(request.email) or _is_blank(request.password):
        return messages.login_fields_required
    return None


def validate_review(request: ReviewCreateRequest, messages: Messages) -> Optional[str]:
    if _is_blank(request.author) or _is_blank(request.text):
        return messages.review_fields_required
    if len(request.author) < MIN_AUTHOR_LENGTH:
        return messages.author_too_short
    if len(request.text) < MIN_REVIEW_TEXT_LENGTH:
        return messages.text_too_short
    return None
