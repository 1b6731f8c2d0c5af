"""
Recommendation strategies.

Two implementations of one interface, chosen once from configuration:

- UnifiedRecommendationStrategy: consolidated candidates, full scoring,
  relevance floor, MMR diversification
- LegacyRecommendationStrategy: degraded mode over the older per-source
  workflow cache, keyword and integration scoring only, no MMR
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from pydantic import ValidationError

from automation_advisor.clients.candidate_store_client import (
    CandidateStoreClient,
    get_candidate_store_client,
)
from automation_advisor.config.heuristics import DEFAULT_HEURISTICS, HeuristicConfig
from automation_advisor.config.settings import get_settings
from automation_advisor.models.solutions import (
    CandidateSolution,
    ScoredRecommendation,
    SubtaskContext,
)
from automation_advisor.solutions.diversification import mmr_select
from automation_advisor.solutions.solution_scorer import score_legacy_solution, score_solution

logger = logging.getLogger(__name__)


def _parse_candidates(rows: List[dict]) -> List[CandidateSolution]:
    """Validate store rows, skipping rows that do not fit the candidate shape."""
    candidates = []
    for row in rows:
        try:
            candidates.append(CandidateSolution.model_validate(row))
        except ValidationError as e:
            logger.warning(f"Skipping malformed candidate {row.get('id')}: {e.error_count()} errors")
    return candidates


class RecommendationStrategy(ABC):
    """
    Abstract interface for producing ranked recommendations.

    Implementations read candidates from the store; store errors propagate.
    """

    name: str = "base"

    def __init__(
        self,
        store: Optional[CandidateStoreClient] = None,
        heuristics: Optional[HeuristicConfig] = None,
    ):
        self.store = store or get_candidate_store_client()
        self.heuristics = heuristics or DEFAULT_HEURISTICS

    @abstractmethod
    def recommend(
        self,
        task_text: str,
        subtasks: Sequence[SubtaskContext],
        selected_integrations: Sequence[str],
        top_k: int,
    ) -> List[ScoredRecommendation]:
        """
        Produce at most top_k recommendations.

        Args:
            task_text: Task text
            subtasks: Subtask contexts
            selected_integrations: Integrations chosen by the user
            top_k: Number of recommendations

        Returns:
            Ranked recommendations
        """
        pass


class UnifiedRecommendationStrategy(RecommendationStrategy):
    """Scores consolidated candidates and diversifies them with MMR."""

    name = "unified"

    def recommend(
        self,
        task_text: str,
        subtasks: Sequence[SubtaskContext],
        selected_integrations: Sequence[str],
        top_k: int,
    ) -> List[ScoredRecommendation]:
        candidates = _parse_candidates(
            self.store.fetch_active_solutions(get_settings().candidate_row_limit)
        )
        if not candidates:
            logger.info("No candidate solutions found")
            return []

        scored = [
            ScoredRecommendation.from_match(
                candidate,
                score_solution(candidate, task_text, subtasks, selected_integrations, self.heuristics),
            )
            for candidate in candidates
        ]
        relevant = sorted(
            (rec for rec in scored if rec.score > self.heuristics.relevance_floor),
            key=lambda rec: rec.score,
            reverse=True,
        )
        selected = mmr_select(relevant, top_k, self.heuristics)

        logger.info(
            "Unified recommendations computed",
            extra={
                "total": len(candidates),
                "filtered": len(relevant),
                "returned": len(selected),
            },
        )
        return selected


class LegacyRecommendationStrategy(RecommendationStrategy):
    """Degraded mode over the legacy per-source workflow cache."""

    name = "legacy"

    def _flatten(self, rows: List[dict]) -> List[CandidateSolution]:
        """Flatten ``{source, workflows[]}`` rows, stamping each entry with its source."""
        entries = []
        for row in rows:
            for workflow in row.get("workflows") or []:
                entries.append({**workflow, "source": row.get("source")})
        return _parse_candidates(entries)

    def recommend(
        self,
        task_text: str,
        subtasks: Sequence[SubtaskContext],
        selected_integrations: Sequence[str],
        top_k: int,
    ) -> List[ScoredRecommendation]:
        candidates = self._flatten(self.store.fetch_legacy_cache_rows())
        if not candidates:
            logger.info("No legacy workflows found")
            return []

        scored = sorted(
            (
                ScoredRecommendation.from_match(
                    candidate,
                    score_legacy_solution(candidate, task_text, selected_integrations, self.heuristics),
                )
                for candidate in candidates
            ),
            key=lambda rec: rec.score,
            reverse=True,
        )
        selected = [rec for rec in scored[:top_k] if rec.score > self.heuristics.relevance_floor]

        logger.info(
            "Legacy recommendations computed",
            extra={"total": len(candidates), "returned": len(selected)},
        )
        return selected


def get_recommendation_strategy(
    unified: Optional[bool] = None,
    store: Optional[CandidateStoreClient] = None,
    heuristics: Optional[HeuristicConfig] = None,
) -> RecommendationStrategy:
    """
    Create the recommendation strategy selected by configuration.

    Args:
        unified: Override for ``settings.unified_workflow_read``
        store: Candidate store client
        heuristics: Heuristic constants

    Returns:
        RecommendationStrategy instance
    """
    if unified is None:
        unified = get_settings().unified_workflow_read
    if unified:
        return UnifiedRecommendationStrategy(store=store, heuristics=heuristics)
    return LegacyRecommendationStrategy(store=store, heuristics=heuristics)
