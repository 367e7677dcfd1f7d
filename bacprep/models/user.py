"""
User model.
"""
from sqlalchemy import Column, Integer, String

from bacprep.db.base import Base, UTCDateTime, utcnow


class User(Base):
    """User model."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    # Uniqueness of username/email is checked by the store on registration only;
    # the demo fixture loader is allowed to insert duplicates.
    username = Column(String, index=True, nullable=False)
    password = Column(String, nullable=False)  # plain text, compared as-is
    display_name = Column(String, nullable=False)
    email = Column(String, index=True, nullable=False)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
