"""
Test fixtures for the Bacalaureat prep backend.

Every test gets its own in-memory store. The tutor runs on LangChain's
FakeListChatModel, or on a model that always fails, so no request ever
reaches OpenAI.
"""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage

from bacprep import models, schemas
from bacprep.core.agents.tutor import TutorGateway
from bacprep.main import create_app
from bacprep.services.storage import SQLStorage


class FailingChatModel:
    """Chat model stand-in whose every call fails like an unreachable service."""

    def __init__(self):
        self.calls = 0

    def invoke(self, messages, *args, **kwargs):
        self.calls += 1
        raise ConnectionError("text-generation service unreachable")


class RecordingChatModel:
    """Chat model stand-in that keeps every message list it receives."""

    def __init__(self, reply="OK"):
        self.reply = reply
        self.received = []

    def invoke(self, messages, *args, **kwargs):
        self.received.append(list(messages))
        return AIMessage(content=self.reply)


@pytest.fixture
def storage():
    return SQLStorage.in_memory()


@pytest.fixture
def seeded_storage(storage):
    storage.initialize_demo_data()
    return storage


@pytest.fixture
def demo_user(seeded_storage):
    return seeded_storage.get_user_by_username("andrei")


@pytest.fixture
def user(storage):
    return storage.create_user(schemas.UserCreate(
        username="maria",
        password="secret",
        display_name="Maria Popescu",
        email="maria@example.com",
    ))


@pytest.fixture
def add_streak(storage):
    """Insert a study session on a given UTC date."""

    def _add(user_id, day, minutes=30, hour=12):
        with storage.SessionLocal() as db:
            db.add(models.StudyStreak(
                user_id=user_id,
                date=datetime(day.year, day.month, day.day, hour, tzinfo=timezone.utc),
                minutes_studied=minutes,
            ))
            db.commit()

    return _add


@pytest.fixture
def make_client(storage):
    """Build a TestClient whose tutor replies with ``responses`` (or always fails)."""

    def _make(responses=None, failing=False, store=None):
        llm = FailingChatModel() if failing else FakeListChatModel(responses=responses or ["OK"])
        app = create_app(storage=store or storage, tutor=TutorGateway(llm=llm))
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def seeded_client(make_client, seeded_storage):
    return make_client(store=seeded_storage)
