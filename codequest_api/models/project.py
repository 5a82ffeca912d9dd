"""
Project model
"""

from datetime import datetime

from sqlmodel import Field, SQLModel  # type: ignore[attr-defined]

from codequest_api.models.timestamps import UtcDatetime, timestamp_field


class ProjectBase(SQLModel):
    """Base project model"""

    name: str
    description: str | None = Field(default=None)
    user_id: int = Field(foreign_key="users.id")


class Project(ProjectBase, table=True):
    """Project database model"""

    __tablename__ = "projects"  # type: ignore[assignment]

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field()


class ProjectRead(ProjectBase):
    """Schema for reading a project"""

    id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime
