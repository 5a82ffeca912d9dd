"""
Timestamp column and field helpers
"""

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import AfterValidator
from sqlalchemy import DateTime
from sqlmodel import Field  # type: ignore[attr-defined]


def ensure_utc(value: datetime) -> datetime:
    """Naive values are read as UTC; aware values are converted to UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


# Serializes with an explicit UTC marker, e.g. "2024-05-01T12:30:00Z"
UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


def timestamp_field() -> Any:
    """timestamptz column defaulting to now (UTC)"""
    return Field(default_factory=lambda: datetime.now(UTC), sa_type=DateTime(timezone=True))
