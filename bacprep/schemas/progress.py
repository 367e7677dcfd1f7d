"""
Pydantic schemas for user progress.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from bacprep.schemas.common import MAX_ID, CamelModel


class UserProgressUpdate(CamelModel):
    """
    Body of ``POST /users/{userId}/progress``.

    Omitted (or null) fields keep their stored value on an existing row.
    """

    subject_id: int = Field(..., le=MAX_ID)
    topics_completed: Optional[int] = Field(None, ge=0)
    percent_complete: Optional[int] = Field(None, ge=0, le=100)
    last_studied: Optional[datetime] = None


class UserProgressUpsert(UserProgressUpdate):
    """Store-level upsert payload."""

    user_id: int


class UserProgress(CamelModel):
    id: int
    user_id: int
    subject_id: int
    topics_completed: int
    percent_complete: int
    last_studied: datetime
