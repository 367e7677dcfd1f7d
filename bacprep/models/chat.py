"""
AI tutor chat history model.
"""
from sqlalchemy import Column, Integer, JSON

from bacprep.db.base import Base, UTCDateTime, utcnow


class AiChatHistory(Base):
    """
    Whole chat transcript of a user.

    One row per user; ``messages`` is replaced, not appended to, on every save.
    """

    __tablename__ = "ai_chat_history"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, unique=True, index=True, nullable=False)
    messages = Column(JSON, nullable=False)  # [{content, isUser}, ...]
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, nullable=False)
