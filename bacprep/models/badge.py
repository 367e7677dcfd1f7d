"""
Badge definitions and awarded badges.
"""
from sqlalchemy import Column, Integer, String

from bacprep.db.base import Base, UTCDateTime, utcnow


class Badge(Base):
    """Achievement definition."""

    __tablename__ = "badges"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    icon = Column(String, nullable=False)
    criteria = Column(String, nullable=False)  # opaque key, e.g. "math_quiz_90"


class UserBadge(Base):
    """Badge earned by a user."""

    __tablename__ = "user_badges"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, index=True, nullable=False)
    badge_id = Column(Integer, nullable=False)
    earned_at = Column(UTCDateTime, default=utcnow, nullable=False)
