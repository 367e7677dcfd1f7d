"""
AI tutoring endpoints.

Question generation reports service failures as 500; the other endpoints
always answer 200, with the tutor's fallback content when the service fails.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status

from bacprep.core.agents.tutor import TutorGateway
from bacprep.core.dependencies import get_tutor
from bacprep.schemas.ai import (
    AnalyzeAnswerRequest,
    AnswerAnalysis,
    ExplanationResponse,
    GenerateExplanationRequest,
    GenerateQuestionsRequest,
    GenerateStudyPlanRequest,
    StudyPlanSuggestion,
)
from bacprep.schemas.test import Question

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate-questions", response_model=List[Question])
def generate_questions(request: GenerateQuestionsRequest, tutor: TutorGateway = Depends(get_tutor)) -> Any:
    """
    Generate multiple-choice practice questions on a topic.

    Raises:
        HTTPException: If the text-generation service fails
    """
    try:
        return tutor.generate_questions(
            request.subject,
            request.topic,
            difficulty=request.difficulty,
            count=request.count,
        )
    except Exception as e:
        logger.error(f"Error generating questions: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate questions",
        )


@router.post("/generate-explanation", response_model=ExplanationResponse)
def generate_explanation(request: GenerateExplanationRequest, tutor: TutorGateway = Depends(get_tutor)) -> Any:
    try:
        explanation = tutor.generate_explanation(request.subject, request.concept)
        return ExplanationResponse(explanation=explanation)
    except Exception as e:
        logger.error(f"Error generating explanation: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate explanation",
        )


@router.post("/analyze-answer", response_model=AnswerAnalysis)
def analyze_answer(request: AnalyzeAnswerRequest, tutor: TutorGateway = Depends(get_tutor)) -> Any:
    try:
        return tutor.analyze_answer(request.question, request.answer, request.subject)
    except Exception as e:
        logger.error(f"Error analyzing answer: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to analyze answer",
        )


@router.post("/generate-study-plan", response_model=StudyPlanSuggestion)
def generate_study_plan(request: GenerateStudyPlanRequest, tutor: TutorGateway = Depends(get_tutor)) -> Any:
    try:
        return tutor.generate_study_plan(request.user_id, request.performance)
    except Exception as e:
        logger.error(f"Error generating study plan: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate study plan",
        )
