"""
Heuristic constants for the Automation Advisor.

Every tunable number used by the classifiers, the aggregator and the
solution ranking lives here, so the algorithms can be tuned and
property-tested without touching their code:

- Automation scoring: category base scores, keyword deltas
- Labels and complexity: score thresholds
- Solution scoring: signal increments and caps
- Diversification: MMR lambda and similarity weights
"""

from dataclasses import dataclass, field
from typing import Dict


def _default_category_scores() -> Dict[str, int]:
    return {
        "administrative": 85,
        "routine": 90,
        "technical": 80,
        "analytical": 75,
        "communication": 40,
        "creative": 30,
        "management": 25,
        "physical": 20,
        "general": 50,
    }


@dataclass(frozen=True)
class HeuristicConfig:
    """
    Heuristic configuration shared by the analysis and recommendation stages.

    Attributes:
        category_base_scores: Starting automation score per task category
        default_base_score: Base score for categories not in the table
        positive_keyword_delta: Added per automation-positive keyword hit
        negative_keyword_penalty: Subtracted per automation-negative keyword hit
        automatable_threshold: Score at or above which a task is "Automatisierbar"
        partial_threshold: Score at or above which a task is partially automatable
        local_confidence: Confidence of the keyword-based classifier (0-1)
        external_confidence: Confidence the parser assigns to LLM tasks (0-100)
        fallback_confidence: Confidence of the fallback task (0-100)
        fallback_potential: Automation potential of the fallback task
        max_recommendations: Upper bound of aggregated recommendation strings
        mmr_lambda: Redundancy weight of the MMR selection
        relevance_floor: Candidates scoring at or below this are dropped
    """
    category_base_scores: Dict[str, int] = field(default_factory=_default_category_scores)
    default_base_score: int = 50
    positive_keyword_delta: int = 5
    negative_keyword_penalty: int = 8

    # Labels / complexity
    automatable_threshold: int = 70
    partial_threshold: int = 30
    local_confidence: float = 0.7
    external_confidence: int = 90
    fallback_confidence: int = 30
    fallback_potential: int = 50
    default_potential: int = 50

    # Job parser complexity from the business case potential
    low_complexity_potential: int = 85
    medium_complexity_potential: int = 60

    # Aggregation
    summary_high_threshold: int = 75
    summary_medium_threshold: int = 50
    recommendation_high_threshold: int = 70
    recommendation_medium_threshold: int = 40
    max_recommendations: int = 8
    industry_recommendation_count: int = 3
    top_tool_count: int = 3

    # Solution scoring
    keyword_match_weight: float = 0.2
    integration_match_weight: float = 0.3
    match_cap: float = 1.0
    base_confidence: float = 0.5
    keyword_confidence: float = 0.2
    integration_confidence: float = 0.3
    ai_generated_boost: float = 0.2
    verified_boost: float = 0.15
    rating_boost: float = 0.1
    popularity_boost: float = 0.1
    downloads_boost: float = 0.1
    complexity_boost: float = 0.1
    category_boost: float = 0.15
    flag_confidence: float = 0.1
    category_confidence: float = 0.15
    rating_threshold: float = 4.0
    popularity_threshold: int = 100
    downloads_threshold: int = 50
    min_keyword_length: int = 4
    legacy_confidence: float = 0.5

    # Diversification
    mmr_lambda: float = 0.7
    category_similarity_weight: float = 0.3
    integration_similarity_weight: float = 0.4
    complexity_similarity_weight: float = 0.2
    source_similarity_weight: float = 0.1
    relevance_floor: float = 0.1

    def base_score_for(self, category: str) -> int:
        """Get the base automation score for a category."""
        return self.category_base_scores.get(category, self.default_base_score)


DEFAULT_HEURISTICS = HeuristicConfig()


def get_heuristics() -> HeuristicConfig:
    """Get the default heuristic configuration."""
    return DEFAULT_HEURISTICS
