"""
Job description parsing.

Extracts the main tasks of a job description with exactly one completion
call (tasks, subtasks and business case batched) and refines each task
with keyword rules for complexity, trend and a context-aware category.

Failure handling:
- Completion service not configured: ConfigurationError (fatal)
- Call raises or times out: logged, recovered with a single fallback task
- Call succeeds without tasks: EmptyExtractionError (fatal)
"""

import asyncio
import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from automation_advisor.analysis.automation_scorer import clamp_score, round_half_up
from automation_advisor.catalog.keywords import (
    HIGH_COMPLEXITY_TRIGGERS,
    INCREASING_TREND_TRIGGERS,
    MEDIUM_COMPLEXITY_TRIGGERS,
    STABLE_TREND_TRIGGERS,
    contains_any,
)
from automation_advisor.clients.llm_client import LLMClient, get_llm_client
from automation_advisor.config.heuristics import DEFAULT_HEURISTICS, HeuristicConfig
from automation_advisor.config.settings import get_settings
from automation_advisor.exceptions import (
    ConfigurationError,
    EmptyExtractionError,
    TransientCompletionError,
)
from automation_advisor.models.analysis import (
    AutomationTrend,
    BusinessCase,
    Complexity,
    Subtask,
    TaskDescriptor,
)

logger = logging.getLogger(__name__)

EXTERNAL_PATTERN = "ai-single-call"
FALLBACK_PATTERN = "fallback"
DEFAULT_CONTEXT_CATEGORY = "Allgemein"

# (job triggers, [(task triggers, category), ...], default category)
ContextRule = Tuple[Tuple[str, ...], Tuple[Tuple[Tuple[str, ...], str], ...], str]

CONTEXT_CATEGORY_RULES: Tuple[ContextRule, ...] = (
    (
        ("hr", "personal", "manager"),
        (
            (("personal", "recruiting", "mitarbeiter"), "Personalwesen"),
            (("gehalt", "abrechnung", "benefits"), "Verwaltung"),
            (("führung", "gespräch"), "Führung"),
            (("schulung", "weiterbildung", "training"), "Weiterbildung"),
            (("vertrag", "compliance", "recht"), "Recht & Compliance"),
        ),
        "Personalwesen",
    ),
    (
        ("buchhalter", "finanz", "accounting"),
        (
            (("buchhaltung", "beleg", "kontierung"), "Buchhaltung"),
            (("abschluss", "monats", "jahres"), "Reporting"),
            (("steuer", "umsatzsteuer", "voranmeldung"), "Steuerwesen"),
            (("mahn", "zahlung", "verkehr"), "Zahlungsverkehr"),
            (("budget", "controlling", "planung"), "Controlling"),
        ),
        "Finanzwesen",
    ),
    (
        ("entwickler", "programmierer", "software"),
        (
            (("entwicklung", "programmierung", "coding"), "Software-Entwicklung"),
            (("daten", "database", "datenbank"), "Datenmanagement"),
            (("api", "integration"), "Integration"),
            (("testing", "test"), "Qualitätssicherung"),
            (("dokumentation", "documentation"), "Dokumentation"),
            (("debugging", "fehlerbehebung"), "Fehlerbehebung"),
        ),
        "Software-Entwicklung",
    ),
)


def determine_complexity(
    task_text: str,
    business_case_potential: Optional[float],
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> Complexity:
    """
    Determine task complexity.

    Keyword triggers take precedence over the business case potential;
    without either, the task is rated high.
    """
    lower_text = task_text.lower()
    if contains_any(lower_text, HIGH_COMPLEXITY_TRIGGERS):
        return Complexity.HIGH
    if contains_any(lower_text, MEDIUM_COMPLEXITY_TRIGGERS):
        return Complexity.MEDIUM
    if business_case_potential is None:
        return Complexity.HIGH
    if business_case_potential >= heuristics.low_complexity_potential:
        return Complexity.LOW
    if business_case_potential >= heuristics.medium_complexity_potential:
        return Complexity.MEDIUM
    return Complexity.HIGH


def determine_trend(task_text: str) -> AutomationTrend:
    """Determine the automation trend of a task from its text."""
    lower_text = task_text.lower()
    if contains_any(lower_text, INCREASING_TREND_TRIGGERS):
        return AutomationTrend.INCREASING
    if contains_any(lower_text, STABLE_TREND_TRIGGERS):
        return AutomationTrend.STABLE
    return AutomationTrend.INCREASING


def detect_context_category(task_text: str, job_text: str) -> str:
    """
    Detect a German category name from the job context and the task text.

    The job text selects the domain (HR, finance, software); the task text
    picks the category within it.
    """
    task_lower = task_text.lower()
    job_lower = job_text.lower()

    for job_triggers, task_rules, default_category in CONTEXT_CATEGORY_RULES:
        if not contains_any(job_lower, job_triggers):
            continue
        for task_triggers, category in task_rules:
            if contains_any(task_lower, task_triggers):
                return category
        return default_category

    return DEFAULT_CONTEXT_CATEGORY


class JobParser:
    """
    Parses job descriptions into task descriptors.

    Example:
        parser = JobParser()
        descriptors = await parser.parse_job_description(job_text, lang="de")
    """

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        timeout_seconds: Optional[float] = None,
        heuristics: Optional[HeuristicConfig] = None,
    ):
        self.llm_client = llm_client or get_llm_client()
        self.timeout_seconds = timeout_seconds or get_settings().llm_timeout_seconds
        self.heuristics = heuristics or DEFAULT_HEURISTICS

    async def parse_job_description(self, job_text: str, lang: str = "de") -> List[TaskDescriptor]:
        """
        Extract the main tasks of a job description.

        Args:
            job_text: Job description
            lang: Language of the analysis (de or en)

        Returns:
            Task descriptors (one fallback descriptor if the call failed)

        Raises:
            ConfigurationError: If the completion service is not configured
            EmptyExtractionError: If the call succeeded but returned no tasks
        """
        if not self.llm_client.is_configured():
            raise ConfigurationError()

        logger.info("Starting job parsing", extra={"lang": lang, "job_text_length": len(job_text)})

        try:
            response = await self._complete(job_text, lang)
        except TransientCompletionError as e:
            logger.warning(f"Completion call failed, using fallback: {e}")
            return [self._fallback_descriptor(job_text)]

        raw_tasks = response.get("tasks") or []
        if not raw_tasks:
            raise EmptyExtractionError()

        try:
            descriptors = [
                self._to_descriptor(raw_task, job_text, response)
                for raw_task in raw_tasks
            ]
        except (ValidationError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Malformed completion response, using fallback: {e}")
            return [self._fallback_descriptor(job_text)]

        logger.info(
            "Job parsing completed",
            extra={"task_count": len(descriptors), "pattern": EXTERNAL_PATTERN},
        )
        return descriptors

    async def _complete(self, job_text: str, lang: str) -> Dict[str, Any]:
        """Run the single completion call under the configured timeout."""
        try:
            return await asyncio.wait_for(
                self.llm_client.analyze_job_description(job_text, lang),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise TransientCompletionError(
                f"Completion call timed out after {self.timeout_seconds}s"
            ) from e
        except Exception as e:
            raise TransientCompletionError(str(e)) from e

    def _to_descriptor(
        self,
        raw_task: Any,
        job_text: str,
        response: Dict[str, Any],
    ) -> TaskDescriptor:
        """Convert one raw task entry (dict or bare string) into a descriptor."""
        if isinstance(raw_task, str):
            raw_task = {"text": raw_task}

        task_text = raw_task["text"]
        business_case = raw_task.get("businessCase") or raw_task.get("business_case")
        business_case = BusinessCase.model_validate(business_case) if business_case else None

        # Fall back to a job-level business case when the task has none
        potential = business_case.automation_potential if business_case else None
        if potential is None:
            job_case = response.get("businessCase") or {}
            potential = job_case.get("automationPotential")

        automation_potential = raw_task.get("automationPotential")
        if automation_potential is None or not math.isfinite(float(automation_potential)):
            automation_potential = self.heuristics.default_potential
        # Service output is untrusted: integer percentage in 0-100
        automation_potential = clamp_score(round_half_up(float(automation_potential)))

        return TaskDescriptor(
            text=task_text,
            automation_potential=automation_potential,
            confidence=self.heuristics.external_confidence,
            category=raw_task.get("category") or detect_context_category(task_text, job_text),
            pattern=EXTERNAL_PATTERN,
            reasoning=raw_task.get("reasoning") or "Single AI call analysis completed",
            subtasks=[Subtask.model_validate(s) for s in raw_task.get("subtasks") or []],
            business_case=business_case,
            complexity=determine_complexity(task_text, potential, self.heuristics),
            trend=determine_trend(task_text),
        )

    def _fallback_descriptor(self, job_text: str) -> TaskDescriptor:
        """Single descriptor covering the whole job text."""
        return TaskDescriptor(
            text=job_text,
            automation_potential=self.heuristics.fallback_potential,
            confidence=self.heuristics.fallback_confidence,
            category="general",
            pattern=FALLBACK_PATTERN,
            reasoning="Fallback analysis due to AI error",
            complexity=Complexity.MEDIUM,
            trend=AutomationTrend.STABLE,
        )
