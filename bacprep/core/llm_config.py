import os
from typing import Optional
from langchain_openai import ChatOpenAI
from pydantic import SecretStr
from bacprep.core.config import Settings, settings as default_settings
from bacprep.core.exceptions import ExternalServiceError


class LLMFactory:
    """Factory for creating configured LLM instances with tracing."""

    @staticmethod
    def create_llm(
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        json_mode: bool = False,
        tracing_project: Optional[str] = None,
        api_key: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> ChatOpenAI:
        """
        Create a configured ChatOpenAI instance.

        Args:
            model: The model name to use (defaults to settings).
            temperature: The temperature for generation (defaults to settings).
            json_mode: Whether to enforce a JSON object reply.
            tracing_project: The LangSmith project name for tracing.
            api_key: OpenAI API key (optional, defaults to settings).
            settings: Settings to read defaults from.

        Raises:
            ExternalServiceError: If no API key is configured
        """
        settings = settings or default_settings
        api_key = api_key or settings.OPENAI_API_KEY
        if not api_key:
            raise ExternalServiceError("OPENAI_API_KEY is not configured")

        # Set env vars for tracing if provided
        if settings.LANGSMITH_TRACING:
            os.environ["LANGCHAIN_TRACING_V2"] = "true"
            os.environ["LANGCHAIN_ENDPOINT"] = settings.LANGSMITH_ENDPOINT
            os.environ["LANGCHAIN_API_KEY"] = settings.LANGSMITH_API_KEY
            os.environ["LANGCHAIN_PROJECT"] = tracing_project or settings.LANGSMITH_PROJECT

        model_kwargs = {"response_format": {"type": "json_object"}} if json_mode else {}

        return ChatOpenAI(
            model=model or settings.OPENAI_MODEL,
            api_key=SecretStr(api_key),
            temperature=settings.OPENAI_TEMPERATURE if temperature is None else temperature,
            timeout=settings.OPENAI_TIMEOUT,
            model_kwargs=model_kwargs,
        )
