"""
Per-user, per-subject progress model.
"""
from sqlalchemy import Column, Integer, UniqueConstraint

from bacprep.db.base import Base, UTCDateTime, utcnow


class UserProgress(Base):
    """Completion record; at most one row per (user, subject)."""

    __tablename__ = "user_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "subject_id", name="uq_user_progress_user_subject"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, index=True, nullable=False)
    subject_id = Column(Integer, nullable=False)
    topics_completed = Column(Integer, nullable=False, default=0)
    percent_complete = Column(Integer, nullable=False, default=0)
    last_studied = Column(UTCDateTime, default=utcnow, nullable=False)
