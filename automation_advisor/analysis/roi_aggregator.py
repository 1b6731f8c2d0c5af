"""
ROI aggregation.

Folds classified tasks into the terminal AnalysisResult: total score,
automatable/human ratio, a localized summary and up to eight
recommendations.
"""

import logging
import math
from typing import List, Optional

from automation_advisor.analysis.automation_scorer import round_half_up
from automation_advisor.catalog.ai_tools import get_industry_recommendations
from automation_advisor.config.heuristics import DEFAULT_HEURISTICS, HeuristicConfig
from automation_advisor.models.analysis import AnalysisResult, AutomationRatio, Task

logger = logging.getLogger(__name__)


NO_TASKS_SUMMARY = {
    "de": (
        "Es konnten keine spezifischen Aufgaben im bereitgestellten Text identifiziert werden. "
        "Bitte geben Sie eine detailliertere Stellenbeschreibung oder Aufgabenliste für die "
        "Analyse an."
    ),
    "en": (
        "No specific tasks could be identified in the provided text. Please provide a more "
        "detailed job description or task list for analysis."
    ),
}

SUMMARY_BANDS = {
    "de": {"high": "hoch", "medium": "mittel", "low": "niedrig"},
    "en": {"high": "high", "medium": "medium", "low": "low"},
}

SCORE_BAND_RECOMMENDATIONS = {
    "de": {
        "high": "Hohes Automatisierungspotenzial! Fokus auf AI-Tools und Workflow-Automatisierung.",
        "medium": "Mittleres Automatisierungspotenzial. Kombinieren Sie AI-Tools mit menschlicher Expertise.",
        "low": "Niedriges Automatisierungspotenzial. Fokus auf menschliche Fähigkeiten und AI-Unterstützung.",
    },
    "en": {
        "high": "High automation potential! Focus on AI tools and workflow automation.",
        "medium": "Medium automation potential. Combine AI tools with human expertise.",
        "low": "Low automation potential. Focus on human skills and AI assistance.",
    },
}

TOOLS_LINE = {
    "de": "Empfohlene AI-Tools: {tools}",
    "en": "Recommended AI tools: {tools}",
}

STRATEGY_RECOMMENDATIONS = {
    "de": [
        "Implementieren Sie schrittweise Automatisierung mit kontinuierlicher Evaluation",
        "Kombinieren Sie AI-Tools mit menschlicher Expertise für optimale Ergebnisse",
        "Fokussieren Sie sich auf repetitive, strukturierte Aufgaben für maximale Effizienz",
    ],
    "en": [
        "Introduce automation step by step with continuous evaluation",
        "Combine AI tools with human expertise for optimal results",
        "Focus on repetitive, structured tasks for maximum efficiency",
    ],
}


def _lang(lang: str) -> str:
    return lang if lang in NO_TASKS_SUMMARY else "de"


def overall_automation_potential(tasks: List[Task]) -> int:
    """Rounded mean of the task scores (0 for no tasks or NaN scores)."""
    if not tasks:
        return 0
    mean = sum(task.score for task in tasks) / len(tasks)
    if math.isnan(mean):
        return 0
    return round_half_up(mean)


def actual_automation_potential(tasks: List[Task]) -> int:
    """Achieved share of the maximum possible score, in percent."""
    if not tasks:
        return 0
    share = sum(task.score for task in tasks) / (len(tasks) * 100) * 100
    if math.isnan(share):
        return 0
    return round_half_up(share)


def primary_industry(tasks: List[Task]) -> str:
    """
    Most frequent industry among the tasks.

    Ties go to the industry whose occurrence comes last in task order.
    """
    industries = [task.industry for task in tasks if task.industry]
    if not industries:
        return "general"
    return sorted(industries, key=industries.count)[-1]


class ROIAggregator:
    """
    Aggregates classified tasks into an AnalysisResult.

    Example:
        aggregator = ROIAggregator()
        result = aggregator.aggregate_results(tasks, job_text, lang="de")
    """

    def __init__(self, heuristics: Optional[HeuristicConfig] = None):
        self.heuristics = heuristics or DEFAULT_HEURISTICS

    def aggregate_results(
        self,
        tasks: List[Task],
        original_text: Optional[str] = None,
        lang: str = "de",
    ) -> AnalysisResult:
        """
        Aggregate tasks into the final analysis result.

        Args:
            tasks: Classified tasks
            original_text: The analysed job text
            lang: Language of summary and recommendations (de or en)

        Returns:
            AnalysisResult
        """
        total_score = overall_automation_potential(tasks)
        automatable = actual_automation_potential(tasks)
        ratio = AutomationRatio(automatisierbar=automatable, mensch=100 - automatable)

        result = AnalysisResult(
            total_score=total_score,
            ratio=ratio,
            tasks=tasks,
            summary=self.generate_summary(total_score, len(tasks), lang),
            recommendations=self.generate_recommendations(tasks, total_score, lang),
            original_text=original_text,
        )

        logger.info(
            "Aggregated analysis results",
            extra={
                "task_count": len(tasks),
                "total_score": total_score,
                "automatable_ratio": automatable,
            },
        )
        return result

    def generate_summary(self, total_score: int, task_count: int, lang: str = "de") -> str:
        """Generate the localized summary sentence."""
        lang = _lang(lang)
        if task_count == 0:
            return NO_TASKS_SUMMARY[lang]

        if total_score >= self.heuristics.summary_high_threshold:
            band = SUMMARY_BANDS[lang]["high"]
        elif total_score >= self.heuristics.summary_medium_threshold:
            band = SUMMARY_BANDS[lang]["medium"]
        else:
            band = SUMMARY_BANDS[lang]["low"]

        if lang == "en":
            return (
                f"Analysis of {task_count} identified tasks revealed {band} "
                f"automation potential of {total_score}%."
            )

        return (
            f"Analyse mit {total_score}% Automatisierungspotenzial ({band}) "
            f"für {task_count} Aufgaben"
        )

    def generate_recommendations(
        self,
        tasks: List[Task],
        overall_score: int,
        lang: str = "de",
    ) -> List[str]:
        """
        Generate at most ``max_recommendations`` recommendation strings.

        Order: score band message, industry recommendations, AI tools line,
        strategy statements.
        """
        lang = _lang(lang)
        recommendations: List[str] = []

        if overall_score >= self.heuristics.recommendation_high_threshold:
            recommendations.append(SCORE_BAND_RECOMMENDATIONS[lang]["high"])
        elif overall_score >= self.heuristics.recommendation_medium_threshold:
            recommendations.append(SCORE_BAND_RECOMMENDATIONS[lang]["medium"])
        else:
            recommendations.append(SCORE_BAND_RECOMMENDATIONS[lang]["low"])

        industry = primary_industry(tasks)
        recommendations.extend(
            get_industry_recommendations(industry, lang)[:self.heuristics.industry_recommendation_count]
        )

        tools: List[str] = []
        for task in tasks:
            for tool in task.ai_tools:
                if tool not in tools:
                    tools.append(tool)
        if tools:
            top_tools = ", ".join(tools[:self.heuristics.top_tool_count])
            recommendations.append(TOOLS_LINE[lang].format(tools=top_tools))

        recommendations.extend(STRATEGY_RECOMMENDATIONS[lang])

        return recommendations[:self.heuristics.max_recommendations]
