"""
Task model
"""

from datetime import datetime

from sqlmodel import Field, SQLModel  # type: ignore[attr-defined]

from codequest_api.models.timestamps import UtcDatetime, timestamp_field


class TaskBase(SQLModel):
    """Base task model"""

    title: str
    description: str | None = Field(default=None)
    # Free-form; the database owns any allowed values
    status: str
    project_id: int = Field(foreign_key="projects.id")
    assigned_user_id: int | None = Field(default=None, foreign_key="users.id")


class Task(TaskBase, table=True):
    """Task database model"""

    __tablename__ = "tasks"  # type: ignore[assignment]

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field()


class TaskRead(TaskBase):
    """Schema for reading a task"""

    id: int
    created_at: UtcDatetime
    updated_at: UtcDatetime
