"""
Tutor gateway: prompt formatting and reply parsing for the AI tutoring features.

Every operation goes through ``TutorGateway._run``, which consults
``FAILURE_POLICY`` when the model call or the parsing fails. Question
generation propagates the failure; the other operations degrade to a
fixed fallback value.
"""
import json
import logging
from typing import Any, Callable, Dict, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from pydantic import ValidationError

from bacprep.core.agents.tutor.prompts import (
    ANSWER_ANALYSIS_SYSTEM_PROMPT,
    ANSWER_ANALYSIS_USER_PROMPT,
    CHAT_SYSTEM_PROMPT,
    EXPLANATION_SYSTEM_PROMPT,
    EXPLANATION_USER_PROMPT,
    QUESTION_GENERATION_SYSTEM_PROMPT,
    STUDY_PLAN_SYSTEM_PROMPT,
    STUDY_PLAN_USER_PROMPT,
)
from bacprep.core.config import Settings, settings as default_settings
from bacprep.core.exceptions import ExternalServiceError
from bacprep.core.llm_config import LLMFactory
from bacprep.schemas import AnswerAnalysis, ChatMessage, Question, StudyPlanSuggestion, SuggestedTask

logger = logging.getLogger(__name__)

DEFAULT_DIFFICULTY = "medium"
DEFAULT_QUESTION_COUNT = 5

EXPLANATION_FALLBACK = "Failed to generate an explanation. Please try again later."
EXPLANATION_EMPTY = "No explanation available."
CHAT_FALLBACK = "I'm having trouble connecting right now. Please try again later."
CHAT_EMPTY = "I don't have an answer for that right now."

# Marks an operation whose failure is re-raised to the caller
PROPAGATE = object()


def _analysis_fallback() -> AnswerAnalysis:
    return AnswerAnalysis(
        score=0,
        feedback="Failed to analyze your answer. Please try again later.",
        strengths=[],
        improvements=[],
        model_answer="",
    )


def _study_plan_fallback() -> StudyPlanSuggestion:
    return StudyPlanSuggestion(tasks=[
        SuggestedTask(
            title="Review your weakest subject",
            description="Focus on topics you scored lowest on in your recent tests",
            duration=30,
            priority=True,
            recommended=True,
        )
    ])


# operation -> PROPAGATE or a factory building a fresh fallback value
FAILURE_POLICY: Dict[str, Any] = {
    "generate_questions": PROPAGATE,
    "generate_explanation": lambda: EXPLANATION_FALLBACK,
    "analyze_answer": _analysis_fallback,
    "generate_study_plan": _study_plan_fallback,
    "process_ai_chat": lambda: CHAT_FALLBACK,
}


def strip_code_fences(text: str) -> str:
    """Return the body of a markdown code block, or the text itself if there is none."""
    if "```json" in text:
        start = text.find("```json") + 7
        end = text.find("```", start)
        return text[start:end if end != -1 else None].strip()
    if "```" in text:
        start = text.find("```") + 3
        end = text.find("```", start)
        return text[start:end if end != -1 else None].strip()
    return text.strip()


def parse_json_reply(text: str) -> Any:
    """
    Decode a JSON reply from the model.

    Raises:
        ExternalServiceError: If the reply is empty or not valid JSON
    """
    body = strip_code_fences(text)
    if not body:
        raise ExternalServiceError("Empty reply from the text-generation service")
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise ExternalServiceError(f"Unparseable reply from the text-generation service: {e}") from e


class TutorGateway:
    """
    Bacalaureat tutor backed by a LangChain chat model.

    The models are created from settings on first use unless one is given,
    in which case it serves both free-text and JSON operations.
    """

    def __init__(self, llm: Optional[BaseChatModel] = None, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self._llm = llm
        self._json_llm = llm

    @property
    def llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = LLMFactory.create_llm(settings=self.settings, tracing_project="bacprep-tutor")
        return self._llm

    @property
    def json_llm(self) -> BaseChatModel:
        """Model constrained to reply with a single JSON object."""
        if self._json_llm is None:
            self._json_llm = LLMFactory.create_llm(
                settings=self.settings, json_mode=True, tracing_project="bacprep-tutor"
            )
        return self._json_llm

    def _complete(self, messages: List[BaseMessage], json_mode: bool = False) -> str:
        try:
            llm = self.json_llm if json_mode else self.llm
            response = llm.invoke(messages)
        except ExternalServiceError:
            raise
        except Exception as e:
            raise ExternalServiceError(f"Text-generation request failed: {e}") from e
        return str(response.content or "")

    def _run(self, operation: str, call: Callable[[], Any]) -> Any:
        try:
            return call()
        except Exception as e:
            policy = FAILURE_POLICY[operation]
            if policy is PROPAGATE:
                logger.error(f"{operation} failed: {e}")
                if isinstance(e, ExternalServiceError):
                    raise
                raise ExternalServiceError(str(e)) from e
            logger.warning(f"{operation} failed, using fallback: {e}")
            return policy()

    # ---------------- Operations ----------------

    def generate_questions(
        self,
        subject: str,
        topic: str,
        difficulty: Optional[str] = DEFAULT_DIFFICULTY,
        count: Optional[int] = DEFAULT_QUESTION_COUNT,
    ) -> List[Question]:
        """
        Generate multiple-choice practice questions.

        Raises:
            ExternalServiceError: If the service fails or no usable question comes back
        """
        difficulty = difficulty or DEFAULT_DIFFICULTY
        count = count or DEFAULT_QUESTION_COUNT

        def call() -> List[Question]:
            prompt = QUESTION_GENERATION_SYSTEM_PROMPT.format(
                count=count, topic=topic, subject=subject, difficulty=difficulty
            )
            logger.info(f"Generating {count} {difficulty} questions on {subject} / {topic}")
            data = parse_json_reply(self._complete([SystemMessage(content=prompt)], json_mode=True))
            return self._parse_questions(data)

        return self._run("generate_questions", call)

    def _parse_questions(self, data: Any) -> List[Question]:
        items = data.get("questions") if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise ExternalServiceError("Reply does not contain a list of questions")

        questions = []
        for i, item in enumerate(items):
            try:
                questions.append(Question.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Dropping malformed question {i}: {e.errors()}")

        if not questions:
            raise ExternalServiceError("No valid questions in the reply")
        return questions

    def generate_explanation(self, subject: str, concept: str) -> str:
        def call() -> str:
            content = self._complete([
                SystemMessage(content=EXPLANATION_SYSTEM_PROMPT),
                HumanMessage(content=EXPLANATION_USER_PROMPT.format(concept=concept, subject=subject)),
            ])
            return content or EXPLANATION_EMPTY

        return self._run("generate_explanation", call)

    def analyze_answer(self, question: str, student_answer: str, subject: str) -> AnswerAnalysis:
        """Grade a free-response answer out of 10."""
        def call() -> AnswerAnalysis:
            data = parse_json_reply(self._complete([
                SystemMessage(content=ANSWER_ANALYSIS_SYSTEM_PROMPT),
                HumanMessage(content=ANSWER_ANALYSIS_USER_PROMPT.format(
                    question=question, answer=student_answer, subject=subject
                )),
            ], json_mode=True))
            return AnswerAnalysis.model_validate(data)

        return self._run("analyze_answer", call)

    def generate_study_plan(self, user_id: int, performance_data: Any) -> StudyPlanSuggestion:
        """Suggest today's study tasks from a user's performance data."""
        def call() -> StudyPlanSuggestion:
            performance = json.dumps(performance_data, default=str, ensure_ascii=False)
            logger.info(f"Generating study plan for user {user_id}")
            data = parse_json_reply(self._complete([
                SystemMessage(content=STUDY_PLAN_SYSTEM_PROMPT),
                HumanMessage(content=STUDY_PLAN_USER_PROMPT.format(performance=performance)),
            ], json_mode=True))
            return StudyPlanSuggestion.model_validate(data)

        return self._run("generate_study_plan", call)

    def process_ai_chat(self, message_history: List[ChatMessage]) -> str:
        """Reply to the last turn of a conversation with the tutor persona."""
        def call() -> str:
            messages: List[BaseMessage] = [SystemMessage(content=CHAT_SYSTEM_PROMPT)]
            for message in message_history:
                if message.is_user:
                    messages.append(HumanMessage(content=message.content))
                else:
                    messages.append(AIMessage(content=message.content))
            return self._complete(messages) or CHAT_EMPTY

        return self._run("process_ai_chat", call)
