"""
Pydantic schemas for practice tests and test results.
"""
from datetime import datetime
from typing import List

from pydantic import Field

from bacprep.schemas.common import MAX_ID, CamelModel


class Question(CamelModel):
    """Multiple-choice question: four options, one correct (0-based index)."""

    question: str
    options: List[str] = Field(..., min_length=4, max_length=4)
    correct_answer: int = Field(..., ge=0, le=3)
    explanation: str = ""


class TestCreate(CamelModel):
    __test__ = False

    name: str
    subject_id: int
    description: str
    questions: List[Question]
    time_limit: int
    difficulty: str


class Test(TestCreate):
    __test__ = False

    id: int


class AnswerRecord(CamelModel):
    question_index: int = Field(..., ge=0)
    selected_option: int
    correct: bool


class TestResultSubmit(CamelModel):
    """Body of ``POST /users/{userId}/test-results``."""

    __test__ = False

    test_id: int = Field(..., le=MAX_ID)
    score: int
    percent_correct: int = Field(..., ge=0, le=100)
    answers: List[AnswerRecord]


class TestResultCreate(TestResultSubmit):
    """Store-level payload."""

    __test__ = False

    user_id: int


class TestResult(CamelModel):
    __test__ = False

    id: int
    user_id: int
    test_id: int
    score: int
    percent_correct: int
    completed_at: datetime
    answers: List[AnswerRecord]


class TestResultDetailed(TestResult):
    """Result enriched with the names of its test and subject."""

    __test__ = False

    test_name: str
    subject_name: str
