"""
User model
"""

from datetime import datetime

from sqlmodel import Field, SQLModel  # type: ignore[attr-defined]

from codequest_api.models.timestamps import UtcDatetime, timestamp_field


class UserBase(SQLModel):
    """Base user model"""

    name: str
    email: str


class User(UserBase, table=True):
    """User database model"""

    __tablename__ = "users"  # type: ignore[assignment]

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field()


class UserRead(UserBase):
    """Schema for reading a user"""

    id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime
