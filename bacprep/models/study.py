"""
Study session and study plan models.
"""
from sqlalchemy import Boolean, Column, Integer, String, Text

from bacprep.db.base import Base, UTCDateTime, utcnow


class StudyStreak(Base):
    """A single recorded study session (several per day are allowed)."""

    __tablename__ = "study_streaks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, index=True, nullable=False)
    date = Column(UTCDateTime, default=utcnow, nullable=False)
    minutes_studied = Column(Integer, nullable=False, default=0)


class StudyPlanTask(Base):
    """Task in a user's study plan."""

    __tablename__ = "study_plan_tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    duration = Column(Integer, nullable=False)  # minutes
    priority = Column(Boolean, nullable=False, default=False)
    recommended = Column(Boolean, nullable=False, default=False)
    completed = Column(Boolean, nullable=False, default=False)
    due_date = Column(UTCDateTime, default=utcnow, nullable=False)
