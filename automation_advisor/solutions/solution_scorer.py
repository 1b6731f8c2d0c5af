"""
Heuristic relevance scoring of candidate solutions.

A candidate starts at score 0 and confidence 0.5; every matching signal
adds to both. Score and confidence are capped at 1.0. Confidence counts
evidence and is not a calibrated probability.
"""

from typing import List, Optional, Sequence

from automation_advisor.config.heuristics import DEFAULT_HEURISTICS, HeuristicConfig
from automation_advisor.models.solutions import CandidateSolution, SolutionMatch, SubtaskContext
from automation_advisor.solutions.integrations import normalize_integration

GENERAL_MATCH = "General match"


def collect_keywords(
    task_text: str,
    subtasks: Sequence[SubtaskContext],
    selected_integrations: Sequence[str],
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> List[str]:
    """Lower-cased keywords from subtasks, selected apps and long task words."""
    keywords: List[str] = []
    for subtask in subtasks:
        keywords.extend(subtask.keywords)
    keywords.extend(selected_integrations)
    keywords.extend(
        word for word in task_text.split(" ")
        if len(word) >= heuristics.min_keyword_length
    )
    return [keyword.lower() for keyword in keywords]


def count_integration_matches(
    solution_integrations: Sequence[str],
    selected_integrations: Sequence[str],
) -> int:
    """Count selected integrations contained in (or containing) a solution integration."""
    available = [normalize_integration(i) for i in solution_integrations]
    matches = 0
    for selected in (normalize_integration(i) for i in selected_integrations):
        if any(selected in integration or integration in selected for integration in available):
            matches += 1
    return matches


def task_complexity(task_lower: str) -> str:
    """Complexity implied by the task text."""
    if "complex" in task_lower or "advanced" in task_lower:
        return "high"
    return "medium"


def task_solution_category(task_lower: str) -> str:
    """Solution category implied by the task text."""
    if "marketing" in task_lower:
        return "marketing"
    if "sales" in task_lower:
        return "sales"
    if "data" in task_lower:
        return "analytics"
    return "general"


def score_solution(
    solution: CandidateSolution,
    task_text: str,
    subtasks: Optional[Sequence[SubtaskContext]] = None,
    selected_integrations: Optional[Sequence[str]] = None,
    heuristics: Optional[HeuristicConfig] = None,
) -> SolutionMatch:
    """
    Score the relevance of a candidate solution for a task context.

    Args:
        solution: Candidate solution
        task_text: Task text
        subtasks: Subtask contexts contributing keywords
        selected_integrations: Integrations (applications) chosen by the user
        heuristics: Heuristic constants (defaults to DEFAULT_HEURISTICS)

    Returns:
        SolutionMatch with score and confidence in [0, 1]
    """
    h = heuristics or DEFAULT_HEURISTICS
    subtasks = subtasks or []
    selected_integrations = selected_integrations or []

    score = 0.0
    confidence = h.base_confidence
    reasons: List[str] = []

    solution_text = solution.text
    solution_tags = [tag.lower() for tag in solution.tags]

    keyword_matches = sum(
        1
        for keyword in collect_keywords(task_text, subtasks, selected_integrations, h)
        if keyword in solution_text or keyword in solution_tags
    )
    if keyword_matches > 0:
        score += min(keyword_matches * h.keyword_match_weight, h.match_cap)
        reasons.append(f"{keyword_matches} keyword matches")
        confidence += h.keyword_confidence

    integration_matches = count_integration_matches(solution.integrations, selected_integrations)
    if integration_matches > 0:
        score += min(integration_matches * h.integration_match_weight, h.match_cap)
        reasons.append(f"{integration_matches} integration matches")
        confidence += h.integration_confidence

    if solution.is_ai_generated:
        score += h.ai_generated_boost
        reasons.append("AI-generated workflow")
        confidence += h.flag_confidence

    if solution.verified:
        score += h.verified_boost
        reasons.append("Verified workflow")
        confidence += h.flag_confidence

    if solution.rating and solution.rating > h.rating_threshold:
        score += h.rating_boost
        reasons.append("High rating")
        confidence += h.flag_confidence

    if solution.popularity and solution.popularity > h.popularity_threshold:
        score += h.popularity_boost
        reasons.append("Popular workflow")
        confidence += h.flag_confidence

    if solution.downloads and solution.downloads > h.downloads_threshold:
        score += h.downloads_boost
        reasons.append("High downloads")
        confidence += h.flag_confidence

    task_lower = task_text.lower()
    if task_complexity(task_lower) == solution.complexity.lower():
        score += h.complexity_boost
        reasons.append("Complexity match")
        confidence += h.flag_confidence

    if task_solution_category(task_lower) in solution.category.lower():
        score += h.category_boost
        reasons.append("Category match")
        confidence += h.category_confidence

    return SolutionMatch(
        score=min(score, 1.0),
        reason=", ".join(reasons) or GENERAL_MATCH,
        confidence=min(confidence, 1.0),
    )


def score_legacy_solution(
    solution: CandidateSolution,
    task_text: str,
    selected_integrations: Optional[Sequence[str]] = None,
    heuristics: Optional[HeuristicConfig] = None,
) -> SolutionMatch:
    """
    Score a legacy cache entry on task keywords and integrations only.

    Legacy entries carry no quality signals, so confidence stays fixed.
    """
    h = heuristics or DEFAULT_HEURISTICS
    selected_integrations = selected_integrations or []

    score = 0.0
    reasons: List[str] = []
    solution_text = f"{solution.title} {solution.description}".lower()

    keyword_matches = sum(
        1
        for word in task_text.split(" ")
        if len(word) >= h.min_keyword_length and word.lower() in solution_text
    )
    if keyword_matches > 0:
        score += min(keyword_matches * h.keyword_match_weight, h.match_cap)
        reasons.append(f"{keyword_matches} keyword matches")

    integration_matches = count_integration_matches(solution.integrations, selected_integrations)
    if integration_matches > 0:
        score += min(integration_matches * h.integration_match_weight, h.match_cap)
        reasons.append(f"{integration_matches} integration matches")

    return SolutionMatch(
        score=min(score, 1.0),
        reason=", ".join(reasons) or GENERAL_MATCH,
        confidence=h.legacy_confidence,
    )
