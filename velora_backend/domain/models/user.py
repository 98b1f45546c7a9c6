from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    email: str
    password_hash: Optional[str] = None  # Left out of profile lookups
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Business validations"""
        if not self.name or not self.name.strip():
            raise ValueError("Name is required")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")

    def to_claims(self) -> dict:
        """Claims embedded in a session token for this user"""
        return {
            "userId": self.id or "",
            "name": self.name,
            "email": self.email,
        }
