"""Models module - Import all models here so their tables are registered."""
from bacprep.db.base import Base
from bacprep.models.user import User
from bacprep.models.subject import Subject, Topic
from bacprep.models.progress import UserProgress
from bacprep.models.test import Test, UserTestResult
from bacprep.models.badge import Badge, UserBadge
from bacprep.models.study import StudyStreak, StudyPlanTask
from bacprep.models.chat import AiChatHistory

__all__ = ["Base", "User", "Subject", "Topic", "UserProgress", "Test", "UserTestResult", "Badge", "UserBadge", "StudyStreak", "StudyPlanTask", "AiChatHistory"]
