# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Review:
    """
    Pure domain model for Review entity - no external dependencies.

    Reviews are public and immutable once created; they carry no link to a
    registered user.
    """
    id: Optional[str]
    author: str
    text: str
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.author or not self.author.strip():
            raise ValueError("Review author is required")
        if not self.text or not self.text.strip():
            raise ValueError("Review text is required")
