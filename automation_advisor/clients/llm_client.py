"""
LLM client for the Automation Advisor.

Provides the single completion call used by the job parser: tasks,
subtasks and a per-task business case are requested in one round trip
and returned as a parsed JSON dict.

The client only talks to the completion service; timeouts and the
fallback on failure are handled by the job parser.
"""

import json
import logging
from typing import Any, Dict, Optional

from automation_advisor.config.settings import get_settings

logger = logging.getLogger(__name__)


SYSTEM_PROMPTS = {
    "de": (
        "Du bist ein Experte für Prozessautomatisierung. Extrahiere die Hauptaufgaben aus der "
        "Stellenbeschreibung und bewerte jede Aufgabe. Erzeuge pro Aufgabe 3-5 Teilaufgaben und "
        "einen Business Case.\n\n"
        "WICHTIG: Antworte ausschließlich mit gültigem JSON, keine zusätzlichen Erklärungen!\n\n"
        "JSON-Format:\n"
        "{{\"tasks\": [{{\"text\": \"Aufgabe\", \"automationPotential\": 85, \"category\": \"admin\", "
        "\"reasoning\": \"Begründung\", "
        "\"subtasks\": [{{\"id\": \"1\", \"title\": \"Teilaufgabe\", \"description\": \"...\", "
        "\"automationPotential\": 80, \"estimatedTime\": 4, \"priority\": \"medium\", "
        "\"complexity\": \"low\", \"systems\": [], \"risks\": [], \"opportunities\": [], "
        "\"dependencies\": []}}], "
        "\"businessCase\": {{\"manualHours\": 160.0, \"automatedHours\": 99.2, "
        "\"automationPotential\": 67, \"savedHours\": 60.8, \"setupCostHours\": 43.0, "
        "\"setupCostMoney\": 1720.0, \"roi\": 120.5, \"paybackPeriodYears\": 0.1, "
        "\"reasoning\": \"Begründung\"}}}}], \"summary\": \"Zusammenfassung\"}}\n\n"
        "Kategorien: admin, tech, analytical, creative, mgmt, comm, routine, physical\n"
        "savedHours = manualHours - automatedHours"
    ),
    "en": (
        "You are an expert in process automation. Extract the main tasks from the job "
        "description and rate each task. Generate 3-5 subtasks and a business case per task.\n\n"
        "IMPORTANT: Respond exclusively with valid JSON, no additional explanations!\n\n"
        "JSON format:\n"
        "{{\"tasks\": [{{\"text\": \"Task\", \"automationPotential\": 85, \"category\": \"admin\", "
        "\"reasoning\": \"Reasoning\", "
        "\"subtasks\": [{{\"id\": \"1\", \"title\": \"Subtask\", \"description\": \"...\", "
        "\"automationPotential\": 80, \"estimatedTime\": 4, \"priority\": \"medium\", "
        "\"complexity\": \"low\", \"systems\": [], \"risks\": [], \"opportunities\": [], "
        "\"dependencies\": []}}], "
        "\"businessCase\": {{\"manualHours\": 160.0, \"automatedHours\": 99.2, "
        "\"automationPotential\": 67, \"savedHours\": 60.8, \"setupCostHours\": 43.0, "
        "\"setupCostMoney\": 1720.0, \"roi\": 120.5, \"paybackPeriodYears\": 0.1, "
        "\"reasoning\": \"Reasoning\"}}}}], \"summary\": \"Summary\"}}\n\n"
        "Categories: admin, tech, analytical, creative, mgmt, comm, routine, physical\n"
        "savedHours = manualHours - automatedHours"
    ),
}

USER_PROMPTS = {
    "de": "Analysiere: {job_text}",
    "en": "Analyze: {job_text}",
}


class LLMClient:
    """
    LLM client for job description analysis.

    The chat model is created lazily so that an unconfigured client can be
    constructed and asked ``is_configured()`` without touching the network.
    """

    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        """
        Initialize LLM client.

        Args:
            provider: LLM provider (only openai-compatible endpoints are supported)
            model: Model name
            api_key: API key
            base_url: Optional OpenAI-compatible base URL
        """
        settings = get_settings()
        self.provider = provider or settings.llm_provider
        self.model = model or settings.llm_model
        self.api_key = api_key or settings.llm_api_key
        self.base_url = base_url or settings.llm_base_url
        self.temperature = settings.llm_temperature
        self.max_tokens = settings.llm_max_tokens
        self.max_input_chars = settings.llm_max_input_chars
        self._llm = None

    def is_configured(self) -> bool:
        """Check whether the completion service can be called."""
        return bool(self.api_key)

    def _get_llm(self):
        """Get or create the chat model instance."""
        if self._llm is not None:
            return self._llm

        if self.provider != "openai":
            raise ValueError(f"Unsupported LLM provider: {self.provider}")

        from langchain_openai import ChatOpenAI

        self._llm = ChatOpenAI(
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            api_key=self.api_key,
            base_url=self.base_url,
            model_kwargs={"response_format": {"type": "json_object"}},
        )
        logger.info(f"Initialized chat model: {self.provider}/{self.model}")
        return self._llm

    async def analyze_job_description(self, job_text: str, lang: str = "de") -> Dict[str, Any]:
        """
        Extract and rate the tasks of a job description in one call.

        Args:
            job_text: Job description (truncated to ``llm_max_input_chars``)
            lang: Prompt language (de or en)

        Returns:
            Parsed response dict with ``tasks`` and ``summary``

        Raises:
            ValueError: If the response is not valid JSON
        """
        from langchain_core.prompts import ChatPromptTemplate

        lang = lang if lang in SYSTEM_PROMPTS else "de"
        prompt_template = ChatPromptTemplate.from_messages([
            ("system", SYSTEM_PROMPTS[lang]),
            ("human", USER_PROMPTS[lang]),
        ])

        llm = self._get_llm()
        prompt_value = prompt_template.invoke({
            "job_text": job_text[:self.max_input_chars],
        })
        response_message = await llm.ainvoke(prompt_value)
        return parse_json_response(response_message.content)


def parse_json_response(content: str) -> Dict[str, Any]:
    """
    Parse a JSON completion, tolerating markdown code fences.

    Raises:
        ValueError: If the content is not a JSON object
    """
    cleaned = (content or "").strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.replace("```json", "", 1).replace("```", "").strip()

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse completion response: {e}")
        raise ValueError("Invalid response format from completion service") from e

    if not isinstance(parsed, dict):
        raise ValueError("Invalid response format from completion service")
    return parsed


# Singleton client instance
_llm_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """
    Get the singleton LLM client instance.

    Returns:
        LLMClient instance
    """
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient()
    return _llm_client


def reset_llm_client():
    """Reset the singleton client (for testing)."""
    global _llm_client
    _llm_client = None
