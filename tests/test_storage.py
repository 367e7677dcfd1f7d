"""Tests for the SQL-backed data store."""
from datetime import date, datetime, timedelta, timezone

import pytest

from bacprep import models, schemas
from bacprep.core.exceptions import NotFoundError, ValidationError
from bacprep.services.storage import UNKNOWN_SUBJECT, UNKNOWN_TEST


def _subject(storage, name="Chemistry"):
    with storage.SessionLocal() as db:
        subject = models.Subject(name=name, description="Organic chemistry", total_topics=3, icon="ri-flask-line")
        db.add(subject)
        db.commit()
        return subject.id


def _test(storage, subject_id, name="Chemistry Quiz"):
    with storage.SessionLocal() as db:
        test = models.Test(
            name=name,
            subject_id=subject_id,
            description="Short quiz",
            questions=[],
            time_limit=10,
            difficulty="easy",
        )
        db.add(test)
        db.commit()
        return test.id


def _result(user_id, test_id, score=50):
    return schemas.TestResultCreate(
        user_id=user_id,
        test_id=test_id,
        score=score,
        percent_correct=score,
        answers=[{"questionIndex": 0, "selectedOption": 1, "correct": True}],
    )


def _backdated_result(storage, user_id, test_id, days_ago, score):
    with storage.SessionLocal() as db:
        db.add(models.UserTestResult(
            user_id=user_id,
            test_id=test_id,
            score=score,
            percent_correct=score,
            completed_at=datetime.now(timezone.utc) - timedelta(days=days_ago),
            answers=[],
        ))
        db.commit()


# ── Users ──────────────────────────────────────────


class TestUsers:
    def test_create_user_assigns_id_and_timestamp(self, storage, user):
        assert user.id == 1
        assert user.created_at.tzinfo is not None
        assert storage.get_user(user.id).username == "maria"

    def test_ids_are_sequential(self, storage, user):
        other = storage.create_user(schemas.UserCreate(
            username="ion", password="pw", display_name="Ion", email="ion@example.com"
        ))
        assert other.id == user.id + 1

    def test_duplicate_username_rejected(self, storage, user):
        with pytest.raises(ValidationError, match="Username already taken"):
            storage.create_user(schemas.UserCreate(
                username="maria", password="x", display_name="Other", email="other@example.com"
            ))

    def test_duplicate_email_rejected(self, storage, user):
        with pytest.raises(ValidationError, match="Email already registered"):
            storage.create_user(schemas.UserCreate(
                username="maria2", password="x", display_name="Other", email="maria@example.com"
            ))

    def test_authenticate_exact_password(self, storage, user):
        assert storage.authenticate_user("maria", "secret").id == user.id
        assert storage.authenticate_user("maria", "Secret") is None
        assert storage.authenticate_user("nobody", "secret") is None

    def test_missing_user_is_none(self, storage):
        assert storage.get_user(42) is None
        assert storage.get_user_by_username("ghost") is None

    def test_public_view_has_no_password(self, user):
        assert "password" not in user.to_public().model_dump()


# ── Catalogue ──────────────────────────────────────────


class TestCatalogue:
    def test_get_subject_absent_returns_none(self, storage):
        assert storage.get_subject(1) is None

    def test_absent_lookups_repeatable_without_writes(self, storage):
        for _ in range(2):
            assert storage.get_subject(1) is None
            assert storage.get_user(1) is None
            assert storage.get_ai_chat_history(1) is None

        with storage.SessionLocal() as db:
            assert db.query(models.Subject).count() == 0
            assert db.query(models.User).count() == 0
            assert db.query(models.AiChatHistory).count() == 0

    def test_topics_sorted_by_order(self, storage):
        subject_id = _subject(storage)
        with storage.SessionLocal() as db:
            for order in (3, 1, 2):
                db.add(models.Topic(
                    subject_id=subject_id, name=f"Topic {order}", description="", content="<p></p>", order=order
                ))
            db.commit()

        topics = storage.get_topics_by_subject(subject_id)
        assert [t.order for t in topics] == [1, 2, 3]
        assert topics[0].difficulty is None

    def test_topics_of_unknown_subject_empty(self, storage):
        assert storage.get_topics_by_subject(99) == []

    def test_tests_by_subject(self, storage):
        chemistry = _subject(storage)
        physics = _subject(storage, "Physics")
        _test(storage, chemistry)
        _test(storage, physics, "Physics Quiz")

        assert [t.name for t in storage.get_tests_by_subject(physics)] == ["Physics Quiz"]
        assert len(storage.get_all_tests()) == 2


# ── Progress ──────────────────────────────────────────


class TestProgress:
    def test_upsert_creates_then_updates_same_row(self, storage, user):
        first = storage.update_user_progress(schemas.UserProgressUpsert(
            user_id=user.id, subject_id=1, topics_completed=2, percent_complete=10
        ))
        second = storage.update_user_progress(schemas.UserProgressUpsert(
            user_id=user.id, subject_id=1, percent_complete=25
        ))

        assert second.id == first.id
        assert second.topics_completed == 2
        assert second.percent_complete == 25
        assert len(storage.get_user_progress(user.id)) == 1

    def test_new_row_defaults(self, storage, user):
        before = datetime.now(timezone.utc)
        progress = storage.update_user_progress(schemas.UserProgressUpsert(user_id=user.id, subject_id=3))

        assert progress.topics_completed == 0
        assert progress.percent_complete == 0
        assert progress.last_studied >= before - timedelta(seconds=1)

    def test_explicit_last_studied_kept(self, storage, user):
        when = datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc)
        progress = storage.update_user_progress(schemas.UserProgressUpsert(
            user_id=user.id, subject_id=1, last_studied=when
        ))
        assert progress.last_studied == when

    def test_rows_per_subject(self, storage, user):
        for subject_id in (1, 2):
            storage.update_user_progress(schemas.UserProgressUpsert(user_id=user.id, subject_id=subject_id))
        assert {p.subject_id for p in storage.get_user_progress(user.id)} == {1, 2}


# ── Test results ──────────────────────────────────────────


class TestTestResults:
    def test_results_newest_first(self, storage, user):
        subject_id = _subject(storage)
        test_id = _test(storage, subject_id)
        _backdated_result(storage, user.id, test_id, days_ago=5, score=10)
        _backdated_result(storage, user.id, test_id, days_ago=1, score=30)
        _backdated_result(storage, user.id, test_id, days_ago=3, score=20)

        assert [r.score for r in storage.get_user_test_results(user.id)] == [30, 20, 10]

    def test_saved_result_is_newest(self, storage, user):
        _backdated_result(storage, user.id, 1, days_ago=2, score=10)
        storage.save_user_test_result(_result(user.id, 1, score=90))

        assert [r.score for r in storage.get_user_test_results(user.id)] == [90, 10]

    def test_results_unchanged_by_reads_and_unrelated_writes(self, storage, user):
        test_id = _test(storage, _subject(storage))
        storage.save_user_test_result(_result(user.id, test_id, score=40))
        storage.save_user_test_result(_result(user.id, test_id, score=70))

        first = storage.get_user_test_results(user.id)
        assert storage.get_user_test_results(user.id) == first

        storage.save_user_test_result(_result(user.id + 1, test_id, score=10))
        storage.update_user_progress(schemas.UserProgressUpsert(user_id=user.id, subject_id=1))
        storage.add_study_streak(schemas.StudyStreakRecord(user_id=user.id, minutes_studied=15))
        assert storage.get_user_test_results(user.id) == first

    def test_results_enriched_with_names(self, storage, user):
        subject_id = _subject(storage)
        test_id = _test(storage, subject_id)
        storage.save_user_test_result(_result(user.id, test_id))

        result = storage.get_user_test_results(user.id)[0]
        assert result.test_name == "Chemistry Quiz"
        assert result.subject_name == "Chemistry"

    def test_unknown_test_falls_back(self, storage, user):
        storage.save_user_test_result(_result(user.id, test_id=999))

        result = storage.get_user_test_results(user.id)[0]
        assert result.test_name == UNKNOWN_TEST
        assert result.subject_name == UNKNOWN_SUBJECT

    def test_unknown_subject_falls_back(self, storage, user):
        test_id = _test(storage, subject_id=777)
        storage.save_user_test_result(_result(user.id, test_id))

        result = storage.get_user_test_results(user.id)[0]
        assert result.test_name == "Chemistry Quiz"
        assert result.subject_name == UNKNOWN_SUBJECT

    def test_answers_stored_in_order(self, storage, user):
        data = _result(user.id, 1)
        data.answers = [
            schemas.AnswerRecord(question_index=1, selected_option=3, correct=False),
            schemas.AnswerRecord(question_index=0, selected_option=0, correct=True),
        ]
        saved = storage.save_user_test_result(data)
        assert [a.question_index for a in saved.answers] == [1, 0]

    def test_completed_at_is_assigned_now(self, storage, user):
        before = datetime.now(timezone.utc)
        saved = storage.save_user_test_result(_result(user.id, 1))
        assert before - timedelta(seconds=1) <= saved.completed_at <= datetime.now(timezone.utc)

    def test_completed_at_not_accepted_from_caller(self):
        assert "completed_at" not in schemas.TestResultCreate.model_fields


# ── Study streaks ──────────────────────────────────────────


class TestStudyStreaks:
    def test_add_streak_is_dated_now_and_not_merged(self, storage, user):
        first = storage.add_study_streak(schemas.StudyStreakRecord(user_id=user.id, minutes_studied=20))
        second = storage.add_study_streak(schemas.StudyStreakRecord(user_id=user.id, minutes_studied=40))

        assert first.date.date() == second.date.date()
        assert len(storage.get_user_study_streaks(user.id)) == 2

    def test_streaks_newest_first(self, storage, user, add_streak):
        add_streak(user.id, date(2024, 5, 1), minutes=10)
        add_streak(user.id, date(2024, 5, 3), minutes=30)
        add_streak(user.id, date(2024, 5, 2), minutes=20)

        assert [s.minutes_studied for s in storage.get_user_study_streaks(user.id)] == [30, 20, 10]


class TestCurrentStreak:
    TODAY = date(2024, 5, 10)

    def test_no_sessions(self, storage, user):
        streak = storage.get_current_streak(user.id, today=self.TODAY)
        assert streak.current_streak == 0
        assert streak.total_minutes == 0
        assert streak.last_studied is None

    def test_counts_distinct_days_ending_today(self, storage, user, add_streak):
        add_streak(user.id, self.TODAY, minutes=20, hour=8)
        add_streak(user.id, self.TODAY, minutes=25, hour=18)
        add_streak(user.id, self.TODAY - timedelta(days=1), minutes=30)
        add_streak(user.id, self.TODAY - timedelta(days=2), minutes=15)
        add_streak(user.id, self.TODAY - timedelta(days=4), minutes=10)

        streak = storage.get_current_streak(user.id, today=self.TODAY)
        assert streak.current_streak == 3
        assert streak.total_minutes == 100
        assert streak.last_studied == self.TODAY

    def test_streak_ending_yesterday_still_counts(self, storage, user, add_streak):
        add_streak(user.id, self.TODAY - timedelta(days=1))
        add_streak(user.id, self.TODAY - timedelta(days=2))

        assert storage.get_current_streak(user.id, today=self.TODAY).current_streak == 2

    def test_streak_broken_after_a_missed_day(self, storage, user, add_streak):
        add_streak(user.id, self.TODAY - timedelta(days=2))
        add_streak(user.id, self.TODAY - timedelta(days=3))

        streak = storage.get_current_streak(user.id, today=self.TODAY)
        assert streak.current_streak == 0
        assert streak.last_studied == self.TODAY - timedelta(days=2)

    def test_other_users_ignored(self, storage, user, add_streak):
        add_streak(user.id + 1, self.TODAY)
        assert storage.get_current_streak(user.id, today=self.TODAY).current_streak == 0


# ── Study plan ──────────────────────────────────────────


class TestStudyPlan:
    def _task(self, storage, user_id, title, priority=False, recommended=False):
        return storage.add_study_plan_task(schemas.StudyPlanTaskRecord(
            user_id=user_id, title=title, description="", duration=20,
            priority=priority, recommended=recommended,
        ))

    def test_new_task_not_completed(self, storage, user):
        task = self._task(storage, user.id, "Read")
        assert task.completed is False
        assert task.due_date is not None

    def test_plan_ordering(self, storage, user):
        self._task(storage, user.id, "plain-1")
        self._task(storage, user.id, "recommended", recommended=True)
        self._task(storage, user.id, "plain-2")
        self._task(storage, user.id, "priority", priority=True)
        self._task(storage, user.id, "both", priority=True, recommended=True)

        titles = [t.title for t in storage.get_user_study_plan(user.id)]
        assert titles == ["both", "priority", "recommended", "plain-1", "plain-2"]

    def test_update_completion(self, storage, user):
        task = self._task(storage, user.id, "Read")
        updated = storage.update_study_plan_task_completion(user.id, task.id, True)
        assert updated.completed is True
        assert storage.get_user_study_plan(user.id)[0].completed is True

    def test_update_missing_task_raises(self, storage, user):
        with pytest.raises(NotFoundError):
            storage.update_study_plan_task_completion(user.id, 404, True)

    def test_update_task_of_other_user_raises(self, storage, user):
        task = self._task(storage, user.id, "Read")
        with pytest.raises(NotFoundError):
            storage.update_study_plan_task_completion(user.id + 1, task.id, True)
        assert storage.get_user_study_plan(user.id)[0].completed is False


# ── Chat history ──────────────────────────────────────────


class TestChatHistory:
    def test_absent_history_is_none(self, storage, user):
        assert storage.get_ai_chat_history(user.id) is None

    def test_save_replaces_messages(self, storage, user):
        first = storage.save_ai_chat_history(schemas.AiChatHistorySave(
            user_id=user.id,
            messages=[{"content": "Hi", "isUser": True}, {"content": "Hello!", "isUser": False}],
        ))
        second = storage.save_ai_chat_history(schemas.AiChatHistorySave(
            user_id=user.id,
            messages=[{"content": "New topic", "isUser": True}],
        ))

        assert second.id == first.id
        assert second.created_at == first.created_at
        assert second.updated_at >= first.updated_at
        history = storage.get_ai_chat_history(user.id)
        assert [m.content for m in history.messages] == ["New topic"]
