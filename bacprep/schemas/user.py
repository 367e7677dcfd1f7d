"""
Pydantic schemas for User model.
"""
from datetime import datetime

from pydantic import EmailStr, Field

from bacprep.schemas.common import CamelModel


class UserBase(CamelModel):
    """Base user schema."""

    username: str = Field(..., min_length=1)
    display_name: str = Field(..., min_length=1)
    email: EmailStr


class UserCreate(UserBase):
    """Schema for user registration."""

    password: str = Field(..., min_length=1)


class UserLogin(CamelModel):
    """Schema for login."""

    username: str
    password: str


class User(UserBase):
    """Schema for user response (never carries the password)."""

    id: int
    created_at: datetime


class UserInDB(User):
    """User as held by the store, password included."""

    password: str

    def to_public(self) -> User:
        return User.model_validate(self.model_dump(exclude={"password"}))
