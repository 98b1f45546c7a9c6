"""Constants for domain model field names"""

from .user_fields import UserFields
from .review_fields import ReviewFields

__all__ = [
    "UserFields",
    "ReviewFields",
]
