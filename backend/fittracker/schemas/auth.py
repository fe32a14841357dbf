"""Authentication schemas."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from fittracker.schemas.user import UserBase, UserResponse


class LoginRequest(BaseModel):
    """Email and password login."""
    email: str
    password: str


class RegisterRequest(UserBase):
    """New account with its initial profile."""
    email: str
    password: str


class AuthResponse(BaseModel):
    """Token issued on login or registration."""
    token: str
    user: UserResponse


class TokenPayload(BaseModel):
    """Decoded bearer token claims."""
    id: int
    email: str
    iat: Optional[datetime] = None
    exp: Optional[datetime] = None
