"""Tests for the HTTP routes."""
import json

import pytest

from bacprep.core.exceptions import BacPrepError, ExternalServiceError, NotFoundError, ValidationError

API = "/api"

REGISTRATION = {
    "username": "elena",
    "password": "parola",
    "displayName": "Elena Ionescu",
    "email": "elena@example.com",
}


class TestHealth:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_domain_errors_translated_by_routes_only(self, client):
        handled = set(client.app.exception_handlers)
        assert not handled & {BacPrepError, ValidationError, NotFoundError, ExternalServiceError}


class TestAuthRoutes:
    def test_register_returns_user_without_password(self, client):
        response = client.post(f"{API}/auth/register", json=REGISTRATION)

        assert response.status_code == 201
        body = response.json()
        assert body["displayName"] == "Elena Ionescu"
        assert "createdAt" in body
        assert "password" not in body

    def test_register_duplicate_username(self, client):
        client.post(f"{API}/auth/register", json=REGISTRATION)
        response = client.post(f"{API}/auth/register", json={**REGISTRATION, "email": "other@example.com"})

        assert response.status_code == 400
        assert response.json() == {"message": "Username already taken"}

    def test_register_invalid_email(self, client):
        response = client.post(f"{API}/auth/register", json={**REGISTRATION, "email": "not-an-email"})
        assert response.status_code == 400
        assert "message" in response.json()

    def test_register_missing_field(self, client):
        payload = {k: v for k, v in REGISTRATION.items() if k != "password"}
        assert client.post(f"{API}/auth/register", json=payload).status_code == 400

    def test_login(self, client):
        client.post(f"{API}/auth/register", json=REGISTRATION)
        response = client.post(f"{API}/auth/login", json={"username": "elena", "password": "parola"})

        assert response.status_code == 200
        assert response.json()["username"] == "elena"
        assert "password" not in response.json()

    def test_login_wrong_password(self, client):
        client.post(f"{API}/auth/register", json=REGISTRATION)
        response = client.post(f"{API}/auth/login", json={"username": "elena", "password": "wrong"})

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials"}


class TestUserRoutes:
    def test_get_user(self, seeded_client, demo_user):
        response = seeded_client.get(f"{API}/users/{demo_user.id}")
        assert response.status_code == 200
        assert response.json()["username"] == "andrei"
        assert "password" not in response.json()

    def test_unknown_user(self, client):
        response = client.get(f"{API}/users/999")
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_malformed_id(self, client):
        response = client.get(f"{API}/users/abc")
        assert response.status_code == 400
        assert "message" in response.json()

    @pytest.mark.parametrize("path", [
        "/users/{id}",
        "/users/{id}/progress",
        "/users/{id}/test-results",
        "/users/{id}/study-plan",
        "/users/{id}/chat-history",
    ])
    def test_id_beyond_integer_range(self, client, path):
        response = client.get(API + path.format(id=2**63))
        assert response.status_code == 400
        assert "message" in response.json()

    def test_largest_id_is_absent(self, client):
        assert client.get(f"{API}/users/{2**63 - 1}").status_code == 404


class TestCatalogueRoutes:
    def test_list_subjects(self, seeded_client):
        subjects = seeded_client.get(f"{API}/subjects").json()
        assert len(subjects) == 4
        assert {"id", "name", "description", "totalTopics", "icon"} <= set(subjects[0])

    def test_subject_not_found(self, client):
        response = client.get(f"{API}/subjects/999")
        assert response.status_code == 404
        assert response.json() == {"message": "Subject not found"}

    def test_subject_id_beyond_integer_range(self, client):
        assert client.get(f"{API}/subjects/{2**63}").status_code == 400
        assert client.get(f"{API}/subjects/{2**63}/topics").status_code == 400
        assert client.get(f"{API}/tests", params={"subjectId": 2**63}).status_code == 400

    def test_topics_sorted(self, seeded_client):
        subject_id = seeded_client.get(f"{API}/subjects").json()[1]["id"]
        topics = seeded_client.get(f"{API}/subjects/{subject_id}/topics").json()

        assert [t["order"] for t in topics] == sorted(t["order"] for t in topics)
        assert all(t["subjectId"] == subject_id for t in topics)

    def test_tests_filtered_by_subject(self, seeded_client):
        subject_id = seeded_client.get(f"{API}/subjects").json()[0]["id"]

        all_tests = seeded_client.get(f"{API}/tests").json()
        filtered = seeded_client.get(f"{API}/tests", params={"subjectId": subject_id}).json()

        assert len(all_tests) == 3
        assert [t["name"] for t in filtered] == ["Romanian Literature Quiz"]
        assert filtered[0]["questions"][0]["correctAnswer"] == 0

    def test_tests_bad_subject_param(self, client):
        assert client.get(f"{API}/tests", params={"subjectId": "abc"}).status_code == 400


class TestProgressRoutes:
    def test_upsert_progress(self, client):
        first = client.post(f"{API}/users/1/progress", json={"subjectId": 2, "percentComplete": 40})
        second = client.post(f"{API}/users/1/progress", json={"subjectId": 2, "topicsCompleted": 5})

        assert first.status_code == 200
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["percentComplete"] == 40
        assert second.json()["topicsCompleted"] == 5
        assert len(client.get(f"{API}/users/1/progress").json()) == 1

    def test_invalid_percent(self, client):
        response = client.post(f"{API}/users/1/progress", json={"subjectId": 2, "percentComplete": 140})
        assert response.status_code == 400

    def test_subject_id_beyond_integer_range(self, client):
        response = client.post(f"{API}/users/1/progress", json={"subjectId": 2**63})
        assert response.status_code == 400
        assert client.get(f"{API}/users/1/progress").json() == []


class TestTestResultRoutes:
    RESULT = {
        "testId": 999,
        "score": 7,
        "percentCorrect": 70,
        "answers": [{"questionIndex": 0, "selectedOption": 1, "correct": True}],
    }

    def test_submit_and_list(self, client):
        response = client.post(f"{API}/users/1/test-results", json=self.RESULT)
        assert response.status_code == 201
        assert response.json()["userId"] == 1

        results = client.get(f"{API}/users/1/test-results").json()
        assert results[0]["testName"] == "Unknown Test"
        assert results[0]["subjectName"] == "Unknown Subject"

    def test_submit_invalid_body(self, client):
        response = client.post(f"{API}/users/1/test-results", json={"testId": 1})
        assert response.status_code == 400

    def test_test_id_beyond_integer_range(self, client):
        response = client.post(f"{API}/users/1/test-results", json={**self.RESULT, "testId": 2**63})
        assert response.status_code == 400


class TestAchievementRoutes:
    def test_badges(self, seeded_client, demo_user):
        badges = seeded_client.get(f"{API}/users/{demo_user.id}/badges").json()
        assert badges[0]["badge"]["name"] == "Math Wizard"
        assert "earnedAt" in badges[0]

    def test_add_streak_and_current(self, client):
        response = client.post(f"{API}/users/1/study-streaks", json={"minutesStudied": 30})
        assert response.status_code == 201

        current = client.get(f"{API}/users/1/study-streaks/current").json()
        assert current["currentStreak"] == 1
        assert current["totalMinutes"] == 30

    def test_negative_minutes_rejected(self, client):
        assert client.post(f"{API}/users/1/study-streaks", json={"minutesStudied": -5}).status_code == 400


class TestStudyPlanRoutes:
    TASK = {"title": "Derivatives", "description": "Exercises 1-10", "duration": 30}

    def test_add_and_complete_task(self, client):
        task = client.post(f"{API}/users/1/study-plan", json={**self.TASK, "priority": True})
        assert task.status_code == 201
        assert task.json()["completed"] is False

        response = client.patch(f"{API}/users/1/study-plan/{task.json()['id']}", json={"completed": True})
        assert response.status_code == 200
        assert response.json()["completed"] is True

    def test_complete_task_of_other_user(self, client):
        task = client.post(f"{API}/users/1/study-plan", json=self.TASK).json()
        response = client.patch(f"{API}/users/2/study-plan/{task['id']}", json={"completed": True})

        assert response.status_code == 404
        assert "message" in response.json()

    def test_task_id_beyond_integer_range(self, client):
        response = client.patch(f"{API}/users/1/study-plan/{2**63}", json={"completed": True})
        assert response.status_code == 400

    @pytest.mark.parametrize("body", [{}, {"completed": "yes"}, {"completed": 1}])
    def test_completed_must_be_boolean(self, client, body):
        task = client.post(f"{API}/users/1/study-plan", json=self.TASK).json()
        response = client.patch(f"{API}/users/1/study-plan/{task['id']}", json=body)
        assert response.status_code == 400


class TestAiRoutes:
    QUESTION = {
        "question": "2 + 2 = ?",
        "options": ["3", "4", "5", "6"],
        "correctAnswer": 1,
        "explanation": "Basic addition.",
    }

    def test_generate_questions(self, make_client):
        client = make_client(responses=[json.dumps({"questions": [self.QUESTION]})])
        response = client.post(f"{API}/ai/generate-questions", json={"subject": "Mathematics", "topic": "Algebra"})

        assert response.status_code == 200
        assert response.json()[0]["correctAnswer"] == 1

    def test_generate_questions_failure_is_500(self, make_client):
        client = make_client(failing=True)
        response = client.post(f"{API}/ai/generate-questions", json={"subject": "Mathematics", "topic": "Algebra"})

        assert response.status_code == 500
        assert response.json() == {"message": "Failed to generate questions"}

    def test_generate_questions_missing_topic(self, client):
        assert client.post(f"{API}/ai/generate-questions", json={"subject": "Mathematics"}).status_code == 400

    def test_explanation_failure_still_200(self, make_client):
        client = make_client(failing=True)
        response = client.post(f"{API}/ai/generate-explanation", json={"subject": "Biology", "concept": "DNA"})

        assert response.status_code == 200
        assert response.json() == {"explanation": "Failed to generate an explanation. Please try again later."}

    def test_analyze_answer_fallback(self, make_client):
        client = make_client(failing=True)
        response = client.post(
            f"{API}/ai/analyze-answer",
            json={"question": "Q", "answer": "A", "subject": "Romanian"},
        )

        assert response.status_code == 200
        assert response.json()["score"] == 0
        assert response.json()["modelAnswer"] == ""

    def test_study_plan_fallback(self, make_client):
        client = make_client(failing=True)
        response = client.post(f"{API}/ai/generate-study-plan", json={"userId": 1, "performance": {"math": 40}})

        assert response.status_code == 200
        assert response.json()["tasks"][0]["title"] == "Review your weakest subject"

    def test_study_plan_user_id_not_coerced(self, client):
        response = client.post(f"{API}/ai/generate-study-plan", json={"userId": "1", "performance": {}})
        assert response.status_code == 400


class TestChatRoutes:
    MESSAGES = [{"content": "What is a limit?", "isUser": True}]

    def test_chat_persists_history(self, make_client):
        client = make_client(responses=["A limit describes where a function is heading."])
        response = client.post(f"{API}/ai/chat", json={"userId": 3, "messages": self.MESSAGES})

        assert response.status_code == 200
        assert response.json() == {"response": "A limit describes where a function is heading."}

        history = client.get(f"{API}/users/3/chat-history").json()
        assert [m["isUser"] for m in history["messages"]] == [True, False]
        assert history["messages"][1]["content"] == "A limit describes where a function is heading."

    def test_chat_failure_persists_fallback(self, make_client):
        client = make_client(failing=True)
        response = client.post(f"{API}/ai/chat", json={"userId": 3, "messages": self.MESSAGES})

        assert response.status_code == 200
        history = client.get(f"{API}/users/3/chat-history").json()
        assert history["messages"][-1]["content"] == response.json()["response"]

    def test_chat_history_absent(self, client):
        response = client.get(f"{API}/users/42/chat-history")
        assert response.status_code == 200
        assert response.json() is None

    def test_chat_invalid_messages(self, client):
        response = client.post(f"{API}/ai/chat", json={"userId": 3, "messages": [{"content": "hi"}]})
        assert response.status_code == 400

    @pytest.mark.parametrize("body", [
        {"userId": "3", "messages": [{"content": "What is a limit?", "isUser": True}]},
        {"userId": 3, "messages": [{"content": "What is a limit?", "isUser": "yes"}]},
        {"userId": 3, "messages": [{"content": "What is a limit?", "isUser": 1}]},
    ])
    def test_chat_types_not_coerced(self, client, body):
        response = client.post(f"{API}/ai/chat", json=body)

        assert response.status_code == 400
        assert client.get(f"{API}/users/3/chat-history").json() is None


class TestDemoRoute:
    def test_init_demo_data(self, client):
        response = client.post(f"{API}/init-demo-data")

        assert response.status_code == 200
        assert response.json() == {"message": "Demo data initialized successfully"}
        assert len(client.get(f"{API}/subjects").json()) == 4
        login = client.post(f"{API}/auth/login", json={"username": "andrei", "password": "password"})
        assert login.status_code == 200
