"""
Pydantic schemas for the AI tutor endpoints.
"""
from typing import Any, List, Optional

from pydantic import Field, StrictInt

from bacprep.schemas.common import CamelModel


class GenerateQuestionsRequest(CamelModel):
    subject: str
    topic: str
    difficulty: Optional[str] = None
    count: Optional[int] = Field(None, ge=1, le=50)


class GenerateExplanationRequest(CamelModel):
    subject: str
    concept: str


class ExplanationResponse(CamelModel):
    explanation: str


class AnalyzeAnswerRequest(CamelModel):
    question: str
    answer: str
    subject: str


class AnswerAnalysis(CamelModel):
    """Grade of a free-response answer."""

    score: float = Field(0, ge=0, le=10)
    feedback: str = ""
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    model_answer: str = ""


class GenerateStudyPlanRequest(CamelModel):
    user_id: StrictInt
    performance: Any = None


class SuggestedTask(CamelModel):
    title: str
    description: str = ""
    duration: int = Field(30, ge=0)
    priority: bool = False
    recommended: bool = False


class StudyPlanSuggestion(CamelModel):
    tasks: List[SuggestedTask] = Field(default_factory=list)
