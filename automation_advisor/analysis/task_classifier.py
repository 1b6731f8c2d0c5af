"""
Task classification.

Turns task text into an aggregation-ready Task, either locally from
keyword heuristics (``classify_task``) or from a job parser descriptor
(``task_from_descriptor``, the pipeline conversion step).
"""

import logging
from typing import Optional

from automation_advisor.analysis.automation_scorer import (
    calculate_automation_potential,
    clamp_score,
    round_half_up,
)
from automation_advisor.analysis.industry_detector import detect_industry, detect_task_category
from automation_advisor.catalog.ai_tools import get_tool_ids_by_industry
from automation_advisor.config.heuristics import DEFAULT_HEURISTICS, HeuristicConfig
from automation_advisor.models.analysis import (
    AutomationTrend,
    Complexity,
    Task,
    TaskDescriptor,
    TaskLabel,
)

logger = logging.getLogger(__name__)


def label_for_score(score: float, heuristics: HeuristicConfig = DEFAULT_HEURISTICS) -> TaskLabel:
    """Map a 0-100 score to its automation label."""
    if score >= heuristics.automatable_threshold:
        return TaskLabel.AUTOMATABLE
    if score >= heuristics.partial_threshold:
        return TaskLabel.PARTIALLY_AUTOMATABLE
    return TaskLabel.HUMAN


def complexity_for_score(score: float, heuristics: HeuristicConfig = DEFAULT_HEURISTICS) -> Complexity:
    """Map a 0-100 score to a complexity band (inverse of automatability)."""
    if score >= heuristics.automatable_threshold:
        return Complexity.LOW
    if score >= heuristics.partial_threshold:
        return Complexity.MEDIUM
    return Complexity.HIGH


class TaskClassifier:
    """
    Classifies tasks into scored, labelled Task records.

    Example:
        classifier = TaskClassifier()
        task = classifier.classify_task("Monatliche Berichte erstellen", job_title="Buchhalter")
    """

    def __init__(self, heuristics: Optional[HeuristicConfig] = None):
        self.heuristics = heuristics or DEFAULT_HEURISTICS

    def classify_task(self, task_text: str, job_title: Optional[str] = None) -> Task:
        """
        Classify a single task locally, without any external call.

        Args:
            task_text: Task text
            job_title: Optional job title used as industry hint

        Returns:
            Classified Task
        """
        industry_text = f"{job_title} {task_text}" if job_title else task_text
        industry = detect_industry(industry_text)
        category = detect_task_category(task_text)
        score = calculate_automation_potential(task_text, category, self.heuristics)

        logger.debug(
            "Classified task locally",
            extra={"category": category, "industry": industry, "score": score},
        )

        return Task(
            text=task_text,
            score=score,
            label=label_for_score(score, self.heuristics),
            signals=[f"Fast analysis: {category} category"],
            ai_tools=get_tool_ids_by_industry(industry),
            industry=industry,
            category=category,
            confidence=self.heuristics.local_confidence,
            automation_ratio=score,
            human_ratio=100 - score,
            complexity=complexity_for_score(score, self.heuristics),
            automation_trend=AutomationTrend.INCREASING,
        )

    def task_from_descriptor(self, descriptor: TaskDescriptor) -> Task:
        """
        Convert a job parser descriptor into a Task.

        The descriptor confidence (0-100) is rescaled to 0-1; complexity and
        trend are carried over from the parser refinement. The potential is
        clamped to an integer in 0-100.
        """
        score = clamp_score(round_half_up(descriptor.automation_potential))
        return Task(
            text=descriptor.text,
            score=score,
            label=label_for_score(score, self.heuristics),
            signals=[descriptor.reasoning or ""],
            ai_tools=get_tool_ids_by_industry(descriptor.category),
            industry=descriptor.category,
            category=descriptor.category,
            confidence=descriptor.confidence / 100,
            automation_ratio=score,
            human_ratio=100 - score,
            complexity=descriptor.complexity,
            automation_trend=descriptor.trend,
            subtasks=list(descriptor.subtasks),
            business_case=descriptor.business_case,
        )
