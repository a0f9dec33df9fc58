"""
User API schemas.

Pydantic models for credentials and account state.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Username and plain text password issued when a profile is created.

    This is the only time the password leaves the service in clear text.
    """
    username: str
    password: str


class PasswordChange(BaseModel):
    """Schema for changing the password of the authenticated user."""
    new_password: str = Field(..., min_length=1)


class ActiveStatusUpdate(BaseModel):
    """Schema for activating or deactivating a profile."""
    is_active: bool


# Response schemas
class UserResponse(BaseModel):
    """Schema for user data in API responses (no sensitive data)."""
    username: str
    first_name: str
    last_name: str
    is_active: bool

    class Config:
        from_attributes = True  # Allows creation from SQLModel objects


class ProfileUpdateBase(BaseModel):
    """Fields shared by trainee and trainer updates; None leaves the value as is."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_active: Optional[bool] = None
