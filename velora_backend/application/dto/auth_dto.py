from typing import Optional

from pydantic import BaseModel

from .user_dto import UserResponse


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request; rules are checked by the validation layer"""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    """DTO for a successful registration or login"""
    success: bool = True
    token: str
    user: UserResponse
