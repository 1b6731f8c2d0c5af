"""
Solutions package for the Automation Advisor.

Contains:
- integrations: Integration name normalization
- solution_scorer: Heuristic relevance scoring
- diversification: MMR selection
- strategies: Unified and legacy recommendation strategies
- recommendation_service: Cached recommendation entry point
"""

from automation_advisor.solutions.integrations import normalize_integration
from automation_advisor.solutions.solution_scorer import score_solution, score_legacy_solution
from automation_advisor.solutions.diversification import mmr_select, solution_similarity
from automation_advisor.solutions.strategies import (
    RecommendationStrategy,
    UnifiedRecommendationStrategy,
    LegacyRecommendationStrategy,
    get_recommendation_strategy,
)
from automation_advisor.solutions.recommendation_service import (
    RecommendationService,
    build_cache_key,
)

__all__ = [
    "normalize_integration",
    "score_solution",
    "score_legacy_solution",
    "mmr_select",
    "solution_similarity",
    "RecommendationStrategy",
    "UnifiedRecommendationStrategy",
    "LegacyRecommendationStrategy",
    "get_recommendation_strategy",
    "RecommendationService",
    "build_cache_key",
]
