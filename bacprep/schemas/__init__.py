"""Schemas module - Import all schemas."""
from bacprep.schemas.user import User, UserCreate, UserInDB, UserLogin
from bacprep.schemas.subject import Subject, SubjectCreate, Topic, TopicCreate
from bacprep.schemas.progress import UserProgress, UserProgressUpdate, UserProgressUpsert
from bacprep.schemas.test import (
    AnswerRecord,
    Question,
    Test,
    TestCreate,
    TestResult,
    TestResultCreate,
    TestResultDetailed,
    TestResultSubmit,
)
from bacprep.schemas.badge import Badge, BadgeCreate, UserBadge, UserBadgeDetailed
from bacprep.schemas.study import (
    CurrentStreak,
    StudyPlanTask,
    StudyPlanTaskCompletion,
    StudyPlanTaskCreate,
    StudyPlanTaskRecord,
    StudyStreak,
    StudyStreakCreate,
    StudyStreakRecord,
)
from bacprep.schemas.chat import AiChatHistory, AiChatHistorySave, ChatMessage, ChatReply, ChatRequest
from bacprep.schemas.ai import (
    AnalyzeAnswerRequest,
    AnswerAnalysis,
    ExplanationResponse,
    GenerateExplanationRequest,
    GenerateQuestionsRequest,
    GenerateStudyPlanRequest,
    StudyPlanSuggestion,
    SuggestedTask,
)
from bacprep.schemas.common import CamelModel, ErrorResponse, Message

__all__ = [
    "User",
    "UserCreate",
    "UserInDB",
    "UserLogin",
    "Subject",
    "SubjectCreate",
    "Topic",
    "TopicCreate",
    "UserProgress",
    "UserProgressUpdate",
    "UserProgressUpsert",
    "AnswerRecord",
    "Question",
    "Test",
    "TestCreate",
    "TestResult",
    "TestResultCreate",
    "TestResultDetailed",
    "TestResultSubmit",
    "Badge",
    "BadgeCreate",
    "UserBadge",
    "UserBadgeDetailed",
    "CurrentStreak",
    "StudyPlanTask",
    "StudyPlanTaskCompletion",
    "StudyPlanTaskCreate",
    "StudyPlanTaskRecord",
    "StudyStreak",
    "StudyStreakCreate",
    "StudyStreakRecord",
    "AiChatHistory",
    "AiChatHistorySave",
    "ChatMessage",
    "ChatReply",
    "ChatRequest",
    "AnalyzeAnswerRequest",
    "AnswerAnalysis",
    "ExplanationResponse",
    "GenerateExplanationRequest",
    "GenerateQuestionsRequest",
    "GenerateStudyPlanRequest",
    "StudyPlanSuggestion",
    "SuggestedTask",
    "CamelModel",
    "ErrorResponse",
    "Message",
]
