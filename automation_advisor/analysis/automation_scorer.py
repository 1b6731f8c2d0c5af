"""
Automation potential scoring.

Scores are integers on a 0–100 scale (0 = fully manual, 100 = fully
automatable). The score starts from a per-category base and is adjusted
by two independent keyword sets; manual signals are penalised more than
automation signals are rewarded.
"""

import math
from typing import Optional

from automation_advisor.catalog.keywords import (
    AUTOMATION_NEGATIVE_KEYWORDS,
    AUTOMATION_POSITIVE_KEYWORDS,
    count_matches,
)
from automation_advisor.config.heuristics import DEFAULT_HEURISTICS, HeuristicConfig

AUTOMATION_MIN = 0
AUTOMATION_MAX = 100


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves rounding up.

    ``round()`` rounds halves to even (``round(52.5) == 52``); automation
    percentages are rounded half-up everywhere (``52.5 -> 53``).
    """
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Clamp a score to the 0–100 range."""
    return int(max(AUTOMATION_MIN, min(AUTOMATION_MAX, value)))


def calculate_automation_potential(
    text: str,
    category: str,
    heuristics: Optional[HeuristicConfig] = None,
) -> int:
    """
    Calculate the automation potential of a task.

    Args:
        text: Task text (lower-cased internally)
        category: Task category from ``detect_task_category``
        heuristics: Heuristic constants (defaults to DEFAULT_HEURISTICS)

    Returns:
        Score in [0, 100]
    """
    heuristics = heuristics or DEFAULT_HEURISTICS
    lower_text = (text or "").lower()

    score = heuristics.base_score_for(category)
    positive_hits = count_matches(lower_text, AUTOMATION_POSITIVE_KEYWORDS)
    negative_hits = count_matches(lower_text, AUTOMATION_NEGATIVE_KEYWORDS)

    score += positive_hits * heuristics.positive_keyword_delta
    score -= negative_hits * heuristics.negative_keyword_penalty

    return clamp_score(score)
