"""
Pydantic schemas for user accounts and authentication.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional

from app.schemas.common import CamelModel, RequestModel


class UserAuthRequest(RequestModel):
    """Request schema for POST /auth/token."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class UserRegisterRequest(RequestModel):
    """Request schema for self-registration; never grants admin."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(
        ...,
        min_length=5,
        max_length=72,  # bcrypt limit
    )
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class UserCreateRequest(UserRegisterRequest):
    """Request schema for admin-created users."""
    is_admin: bool = False


class UserUpdateRequest(RequestModel):
    """Partial user update; isAdmin cannot be changed this way."""
    password: Optional[str] = Field(None, min_length=5, max_length=72)
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None


class TokenResponse(BaseModel):
    """JWT token response."""
    token: str


class UserOut(CamelModel):
    """User profile response (no password hash)."""
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserResponse(BaseModel):
    user: UserOut


class UserCreatedResponse(BaseModel):
    user: UserOut
    token: str


class UserListResponse(BaseModel):
    users: List[UserOut]
