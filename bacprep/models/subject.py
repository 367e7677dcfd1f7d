"""
Subject and topic (lesson) models.
"""
from sqlalchemy import Column, Integer, String, Text, JSON

from bacprep.db.base import Base


class Subject(Base):
    """Exam subject, e.g. Mathematics."""

    __tablename__ = "subjects"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    total_topics = Column(Integer, nullable=False)
    icon = Column(String, nullable=False)


class Topic(Base):
    """Lesson inside a subject, ordered by ``order``."""

    __tablename__ = "topics"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    subject_id = Column(Integer, index=True, nullable=False)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    content = Column(JSON, nullable=False)  # rich text (HTML)
    order = Column(Integer, nullable=False)
    difficulty = Column(String, nullable=True)
