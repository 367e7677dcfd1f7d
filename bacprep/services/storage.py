"""
Data store for every entity of the application.

``Storage`` is the interface the API layer depends on; ``SQLStorage`` keeps
the data in a SQLAlchemy database (in-memory SQLite unless configured
otherwise). Lookups of a single entity return ``None`` when it is absent.
"""
import logging
from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from bacprep import models, schemas
from bacprep.core.exceptions import NotFoundError, ValidationError
from bacprep.db.base import create_session_factory, utcnow
from bacprep.db.init_db import init_demo_data

logger = logging.getLogger(__name__)

UNKNOWN_TEST = "Unknown Test"
UNKNOWN_SUBJECT = "Unknown Subject"


class Storage(ABC):
    """Operations the API layer may perform on stored data."""

    # User operations
    @abstractmethod
    def get_user(self, user_id: int) -> Optional[schemas.UserInDB]:
        ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[schemas.UserInDB]:
        ...

    @abstractmethod
    def create_user(self, data: schemas.UserCreate) -> schemas.UserInDB:
        """
        Register a user.

        Raises:
            ValidationError: If the username or email is already taken
        """

    @abstractmethod
    def authenticate_user(self, username: str, password: str) -> Optional[schemas.UserInDB]:
        """Return the user only when the password matches exactly, else ``None``."""

    # Subject and topic operations
    @abstractmethod
    def get_all_subjects(self) -> List[schemas.Subject]:
        ...

    @abstractmethod
    def get_subject(self, subject_id: int) -> Optional[schemas.Subject]:
        ...

    @abstractmethod
    def get_topics_by_subject(self, subject_id: int) -> List[schemas.Topic]:
        """Topics of a subject, ascending by ``order``."""

    # Progress operations
    @abstractmethod
    def get_user_progress(self, user_id: int) -> List[schemas.UserProgress]:
        ...

    @abstractmethod
    def update_user_progress(self, data: schemas.UserProgressUpsert) -> schemas.UserProgress:
        """
        Upsert the progress row of ``(data.user_id, data.subject_id)``.

        Fields left as ``None`` keep their stored value on an existing row and
        default to 0 on a new one; ``last_studied`` defaults to now either way.
        """

    # Test operations
    @abstractmethod
    def get_all_tests(self) -> List[schemas.Test]:
        ...

    @abstractmethod
    def get_tests_by_subject(self, subject_id: int) -> List[schemas.Test]:
        ...

    @abstractmethod
    def get_user_test_results(self, user_id: int) -> List[schemas.TestResultDetailed]:
        """Results of a user, newest first, with test and subject names resolved."""

    @abstractmethod
    def save_user_test_result(self, data: schemas.TestResultCreate) -> schemas.TestResult:
        ...

    # Badge operations
    @abstractmethod
    def get_user_badges(self, user_id: int) -> List[schemas.UserBadgeDetailed]:
        ...

    # Study streak operations
    @abstractmethod
    def get_user_study_streaks(self, user_id: int) -> List[schemas.StudyStreak]:
        """Study sessions of a user, newest first."""

    @abstractmethod
    def add_study_streak(self, data: schemas.StudyStreakRecord) -> schemas.StudyStreak:
        """Record a study session dated now. Same-day sessions are not merged."""

    def get_current_streak(self, user_id: int, today: Optional[date] = None) -> schemas.CurrentStreak:
        """
        Count consecutive study days ending today or yesterday.

        Works on distinct calendar dates, so several sessions on one day
        count as a single day.
        """
        entries = self.get_user_study_streaks(user_id)
        today = today or utcnow().date()
        study_dates = sorted({entry.date.date() for entry in entries}, reverse=True)

        streak = 0
        if study_dates and (today - study_dates[0]).days <= 1:
            streak = 1
            for newer, older in zip(study_dates, study_dates[1:]):
                if newer - older != timedelta(days=1):
                    break
                streak += 1

        return schemas.CurrentStreak(
            user_id=user_id,
            current_streak=streak,
            total_minutes=sum(entry.minutes_studied for entry in entries),
            last_studied=study_dates[0] if study_dates else None,
        )

    # Study plan operations
    @abstractmethod
    def get_user_study_plan(self, user_id: int) -> List[schemas.StudyPlanTask]:
        """Tasks of a user: priority tasks first, then recommended ones, then the rest."""

    @abstractmethod
    def add_study_plan_task(self, data: schemas.StudyPlanTaskRecord) -> schemas.StudyPlanTask:
        ...

    @abstractmethod
    def update_study_plan_task_completion(
        self, user_id: int, task_id: int, completed: bool
    ) -> schemas.StudyPlanTask:
        """
        Set the completed flag of a task.

        Raises:
            NotFoundError: If the task does not exist or belongs to another user
        """

    # AI chat history operations
    @abstractmethod
    def get_ai_chat_history(self, user_id: int) -> Optional[schemas.AiChatHistory]:
        ...

    @abstractmethod
    def save_ai_chat_history(self, data: schemas.AiChatHistorySave) -> schemas.AiChatHistory:
        """Replace the user's stored messages with ``data.messages``."""

    # Demo data
    @abstractmethod
    def initialize_demo_data(self) -> None:
        """Load the demo fixtures. Calling it twice duplicates them."""


class SQLStorage(Storage):
    """``Storage`` backed by a SQLAlchemy session factory."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self.SessionLocal = session_factory

    @classmethod
    def from_url(cls, database_url: str) -> "SQLStorage":
        return cls(create_session_factory(database_url))

    @classmethod
    def in_memory(cls) -> "SQLStorage":
        """A store with its own private, empty in-memory database."""
        return cls.from_url("sqlite://")

    # ---------------- Users ----------------

    def get_user(self, user_id: int) -> Optional[schemas.UserInDB]:
        with self.SessionLocal() as db:
            user = db.query(models.User).filter(models.User.id == user_id).first()
            return schemas.UserInDB.model_validate(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[schemas.UserInDB]:
        with self.SessionLocal() as db:
            user = (
                db.query(models.User)
                .filter(models.User.username == username)
                .order_by(models.User.id)
                .first()
            )
            return schemas.UserInDB.model_validate(user) if user else None

    def create_user(self, data: schemas.UserCreate) -> schemas.UserInDB:
        with self.SessionLocal() as db:
            if db.query(models.User).filter(models.User.username == data.username).first():
                raise ValidationError("Username already taken")
            if db.query(models.User).filter(models.User.email == data.email).first():
                raise ValidationError("Email already registered")

            user = models.User(
                username=data.username,
                password=data.password,
                display_name=data.display_name,
                email=data.email,
                created_at=utcnow(),
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"Created user {user.id} ({user.username})")
            return schemas.UserInDB.model_validate(user)

    def authenticate_user(self, username: str, password: str) -> Optional[schemas.UserInDB]:
        user = self.get_user_by_username(username)
        if user and user.password == password:
            return user
        return None

    # ---------------- Subjects & topics ----------------

    def get_all_subjects(self) -> List[schemas.Subject]:
        with self.SessionLocal() as db:
            rows = db.query(models.Subject).order_by(models.Subject.id).all()
            return [schemas.Subject.model_validate(r) for r in rows]

    def get_subject(self, subject_id: int) -> Optional[schemas.Subject]:
        with self.SessionLocal() as db:
            subject = db.query(models.Subject).filter(models.Subject.id == subject_id).first()
            return schemas.Subject.model_validate(subject) if subject else None

    def get_topics_by_subject(self, subject_id: int) -> List[schemas.Topic]:
        with self.SessionLocal() as db:
            rows = (
                db.query(models.Topic)
                .filter(models.Topic.subject_id == subject_id)
                .order_by(models.Topic.order.asc(), models.Topic.id.asc())
                .all()
            )
            return [schemas.Topic.model_validate(r) for r in rows]

    # ---------------- Progress ----------------

    def get_user_progress(self, user_id: int) -> List[schemas.UserProgress]:
        with self.SessionLocal() as db:
            rows = db.query(models.UserProgress).filter(models.UserProgress.user_id == user_id).all()
            return [schemas.UserProgress.model_validate(r) for r in rows]

    def update_user_progress(self, data: schemas.UserProgressUpsert) -> schemas.UserProgress:
        with self.SessionLocal() as db:
            progress = db.query(models.UserProgress).filter(
                models.UserProgress.user_id == data.user_id,
                models.UserProgress.subject_id == data.subject_id,
            ).first()

            if progress:
                if data.topics_completed is not None:
                    progress.topics_completed = data.topics_completed
                if data.percent_complete is not None:
                    progress.percent_complete = data.percent_complete
                logger.debug(f"Updating progress {progress.id} for user {data.user_id}")
            else:
                progress = models.UserProgress(
                    user_id=data.user_id,
                    subject_id=data.subject_id,
                    topics_completed=data.topics_completed if data.topics_completed is not None else 0,
                    percent_complete=data.percent_complete if data.percent_complete is not None else 0,
                )
                db.add(progress)
                logger.debug(f"Creating progress for user {data.user_id}, subject {data.subject_id}")

            progress.last_studied = data.last_studied or utcnow()
            db.commit()
            db.refresh(progress)
            return schemas.UserProgress.model_validate(progress)

    # ---------------- Tests & results ----------------

    def get_all_tests(self) -> List[schemas.Test]:
        with self.SessionLocal() as db:
            rows = db.query(models.Test).order_by(models.Test.id).all()
            return [schemas.Test.model_validate(r) for r in rows]

    def get_tests_by_subject(self, subject_id: int) -> List[schemas.Test]:
        with self.SessionLocal() as db:
            rows = (
                db.query(models.Test)
                .filter(models.Test.subject_id == subject_id)
                .order_by(models.Test.id)
                .all()
            )
            return [schemas.Test.model_validate(r) for r in rows]

    def get_user_test_results(self, user_id: int) -> List[schemas.TestResultDetailed]:
        with self.SessionLocal() as db:
            results = (
                db.query(models.UserTestResult)
                .filter(models.UserTestResult.user_id == user_id)
                .order_by(models.UserTestResult.completed_at.desc(), models.UserTestResult.id.desc())
                .all()
            )

            # Names are resolved at read time; the referenced test may be gone.
            test_ids = {r.test_id for r in results}
            tests = {t.id: t for t in db.query(models.Test).filter(models.Test.id.in_(test_ids)).all()}
            subject_ids = {t.subject_id for t in tests.values()}
            subjects = {
                s.id: s for s in db.query(models.Subject).filter(models.Subject.id.in_(subject_ids)).all()
            }

            detailed = []
            for result in results:
                test = tests.get(result.test_id)
                subject = subjects.get(test.subject_id) if test else None
                detailed.append(
                    schemas.TestResultDetailed(
                        **schemas.TestResult.model_validate(result).model_dump(),
                        test_name=test.name if test else UNKNOWN_TEST,
                        subject_name=subject.name if subject else UNKNOWN_SUBJECT,
                    )
                )
            return detailed

    def save_user_test_result(self, data: schemas.TestResultCreate) -> schemas.TestResult:
        with self.SessionLocal() as db:
            result = models.UserTestResult(
                user_id=data.user_id,
                test_id=data.test_id,
                score=data.score,
                percent_correct=data.percent_correct,
                completed_at=utcnow(),
                answers=[a.model_dump(by_alias=True) for a in data.answers],
            )
            db.add(result)
            db.commit()
            db.refresh(result)
            return schemas.TestResult.model_validate(result)

    # ---------------- Badges ----------------

    def get_user_badges(self, user_id: int) -> List[schemas.UserBadgeDetailed]:
        with self.SessionLocal() as db:
            rows = (
                db.query(models.UserBadge, models.Badge)
                .join(models.Badge, models.Badge.id == models.UserBadge.badge_id)
                .filter(models.UserBadge.user_id == user_id)
                .order_by(models.UserBadge.id)
                .all()
            )
            return [
                schemas.UserBadgeDetailed(
                    **schemas.UserBadge.model_validate(user_badge).model_dump(),
                    badge=schemas.Badge.model_validate(badge),
                )
                for user_badge, badge in rows
            ]

    # ---------------- Study streaks ----------------

    def get_user_study_streaks(self, user_id: int) -> List[schemas.StudyStreak]:
        with self.SessionLocal() as db:
            rows = (
                db.query(models.StudyStreak)
                .filter(models.StudyStreak.user_id == user_id)
                .order_by(models.StudyStreak.date.desc(), models.StudyStreak.id.desc())
                .all()
            )
            return [schemas.StudyStreak.model_validate(r) for r in rows]

    def add_study_streak(self, data: schemas.StudyStreakRecord) -> schemas.StudyStreak:
        with self.SessionLocal() as db:
            streak = models.StudyStreak(
                user_id=data.user_id,
                date=utcnow(),
                minutes_studied=data.minutes_studied,
            )
            db.add(streak)
            db.commit()
            db.refresh(streak)
            return schemas.StudyStreak.model_validate(streak)

    # ---------------- Study plan ----------------

    def get_user_study_plan(self, user_id: int) -> List[schemas.StudyPlanTask]:
        with self.SessionLocal() as db:
            rows = (
                db.query(models.StudyPlanTask)
                .filter(models.StudyPlanTask.user_id == user_id)
                .order_by(
                    models.StudyPlanTask.priority.desc(),
                    models.StudyPlanTask.recommended.desc(),
                    models.StudyPlanTask.id.asc(),
                )
                .all()
            )
            return [schemas.StudyPlanTask.model_validate(r) for r in rows]

    def add_study_plan_task(self, data: schemas.StudyPlanTaskRecord) -> schemas.StudyPlanTask:
        with self.SessionLocal() as db:
            task = models.StudyPlanTask(
                user_id=data.user_id,
                title=data.title,
                description=data.description,
                duration=data.duration,
                priority=data.priority,
                recommended=data.recommended,
                completed=False,
                due_date=data.due_date or utcnow(),
            )
            db.add(task)
            db.commit()
            db.refresh(task)
            return schemas.StudyPlanTask.model_validate(task)

    def update_study_plan_task_completion(
        self, user_id: int, task_id: int, completed: bool
    ) -> schemas.StudyPlanTask:
        with self.SessionLocal() as db:
            task = db.query(models.StudyPlanTask).filter(models.StudyPlanTask.id == task_id).first()
            if not task or task.user_id != user_id:
                raise NotFoundError("Task not found or doesn't belong to the user")

            task.completed = completed
            db.commit()
            db.refresh(task)
            return schemas.StudyPlanTask.model_validate(task)

    # ---------------- AI chat history ----------------

    def get_ai_chat_history(self, user_id: int) -> Optional[schemas.AiChatHistory]:
        with self.SessionLocal() as db:
            history = db.query(models.AiChatHistory).filter(models.AiChatHistory.user_id == user_id).first()
            return schemas.AiChatHistory.model_validate(history) if history else None

    def save_ai_chat_history(self, data: schemas.AiChatHistorySave) -> schemas.AiChatHistory:
        messages = [m.model_dump(by_alias=True) for m in data.messages]
        now = utcnow()
        with self.SessionLocal() as db:
            history = db.query(models.AiChatHistory).filter(models.AiChatHistory.user_id == data.user_id).first()
            if history:
                history.messages = messages
                history.updated_at = now
            else:
                history = models.AiChatHistory(
                    user_id=data.user_id,
                    messages=messages,
                    created_at=now,
                    updated_at=now,
                )
                db.add(history)
            db.commit()
            db.refresh(history)
            return schemas.AiChatHistory.model_validate(history)

    # ---------------- Demo data ----------------

    def initialize_demo_data(self) -> None:
        with self.SessionLocal() as db:
            init_demo_data(db)
