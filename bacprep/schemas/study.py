"""
Pydantic schemas for study streaks and study plan tasks.
"""
from datetime import date, datetime
from typing import Optional

from pydantic import Field, StrictBool

from bacprep.schemas.common import CamelModel


class StudyStreakCreate(CamelModel):
    """Body of ``POST /users/{userId}/study-streaks``."""

    minutes_studied: int = Field(0, ge=0)


class StudyStreak(CamelModel):
    id: int
    user_id: int
    date: datetime
    minutes_studied: int


class CurrentStreak(CamelModel):
    """Consecutive-day streak computed over distinct study dates."""

    user_id: int
    current_streak: int
    total_minutes: int
    last_studied: Optional[date] = None


class StudyPlanTaskCreate(CamelModel):
    """Body of ``POST /users/{userId}/study-plan``."""

    title: str = Field(..., min_length=1)
    description: str
    duration: int = Field(..., ge=0)
    priority: bool = False
    recommended: bool = False
    due_date: Optional[datetime] = None


class StudyPlanTaskCompletion(CamelModel):
    """Body of ``PATCH /users/{userId}/study-plan/{taskId}``."""

    completed: StrictBool


class StudyPlanTask(CamelModel):
    id: int
    user_id: int
    title: str
    description: str
    duration: int
    priority: bool
    recommended: bool
    completed: bool
    due_date: datetime


class StudyStreakRecord(StudyStreakCreate):
    """Store-level payload for a new study session."""

    user_id: int


class StudyPlanTaskRecord(StudyPlanTaskCreate):
    """Store-level payload for a new study plan task."""

    user_id: int
