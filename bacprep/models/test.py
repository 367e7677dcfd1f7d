"""
Practice test and test result models.
"""
from sqlalchemy import Column, Integer, String, Text, JSON

from bacprep.db.base import Base, UTCDateTime, utcnow


class Test(Base):
    """Practice test with an ordered list of multiple-choice questions."""

    __tablename__ = "tests"
    __table_args__ = {"sqlite_autoincrement": True}
    __test__ = False  # not a pytest test class

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    subject_id = Column(Integer, index=True, nullable=False)
    description = Column(Text, nullable=False)
    # [{question, options[4], correctAnswer, explanation}, ...]
    questions = Column(JSON, nullable=False)
    time_limit = Column(Integer, nullable=False)  # minutes
    difficulty = Column(String, nullable=False)


class UserTestResult(Base):
    """One attempt at a test. Never updated after creation."""

    __tablename__ = "user_test_results"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, index=True, nullable=False)
    # Not a foreign key: results keep pointing at tests that may no longer exist.
    test_id = Column(Integer, nullable=False)
    score = Column(Integer, nullable=False)
    percent_correct = Column(Integer, nullable=False)
    completed_at = Column(UTCDateTime, default=utcnow, nullable=False)
    # [{questionIndex, selectedOption, correct}, ...]
    answers = Column(JSON, nullable=False)
