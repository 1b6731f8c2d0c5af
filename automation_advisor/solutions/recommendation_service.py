"""
Recommendation service.

Entry point of the recommendation pipeline:

    cache lookup → strategy (read, score, filter, sort, diversify) → cache write

The cache is consulted before any scoring and a hit short-circuits the
strategy entirely. Cache failures are logged and ignored; candidate store
failures propagate as CandidateStoreError.
"""

import hashlib
import json
import logging
from typing import Any, Iterable, List, Optional, Sequence, Union

from pydantic import ValidationError

from automation_advisor.clients.cache_client import CacheClient, get_cache_client
from automation_advisor.config.settings import Settings, get_settings
from automation_advisor.models.solutions import ScoredRecommendation, SubtaskContext
from automation_advisor.solutions.integrations import normalize_integration
from automation_advisor.solutions.strategies import (
    RecommendationStrategy,
    get_recommendation_strategy,
)

logger = logging.getLogger(__name__)


def build_cache_key(
    prefix: str,
    task_text: str,
    subtask_id: Optional[str] = None,
    top_k: Optional[int] = None,
    selected_integrations: Optional[Iterable[str]] = None,
) -> str:
    """
    Build the recommendation cache key.

    The key combines a digest of the task text, top_k and the normalized,
    sorted integrations with the subtask id, or ``all`` when recommending
    for the whole task. Integration order and synonyms do not change the key.
    """
    integrations = sorted({
        normalize_integration(integration)
        for integration in selected_integrations or []
        if integration and integration.strip()
    })
    material = json.dumps([task_text or "", top_k, integrations], ensure_ascii=False)
    digest = hashlib.sha256(material.encode("utf-8")).hexdigest()[:16]
    return f"{prefix}:recommendations:{digest}:{subtask_id or 'all'}"


def _to_subtask_contexts(
    subtasks: Optional[Iterable[Union[SubtaskContext, dict]]],
) -> List[SubtaskContext]:
    return [
        subtask if isinstance(subtask, SubtaskContext) else SubtaskContext.model_validate(subtask)
        for subtask in subtasks or []
    ]


class RecommendationService:
    """
    Produces ranked, diversified solution recommendations for a task.

    Example:
        service = RecommendationService()
        recommendations = service.recommend(
            "Rechnungen aus Gmail in Google Sheets übertragen",
            selected_integrations=["Gmail", "Sheets"],
            top_k=6,
        )
    """

    def __init__(
        self,
        strategy: Optional[RecommendationStrategy] = None,
        cache: Optional[CacheClient] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.strategy = strategy or get_recommendation_strategy(self.settings.unified_workflow_read)
        self.cache = cache if cache is not None else get_cache_client()

    def recommend(
        self,
        task_text: str,
        subtasks: Optional[Sequence[Union[SubtaskContext, dict]]] = None,
        selected_integrations: Optional[Sequence[str]] = None,
        top_k: Optional[int] = None,
        subtask_id: Optional[str] = None,
    ) -> List[ScoredRecommendation]:
        """
        Recommend solutions for a task or one of its subtasks.

        Args:
            task_text: Task text
            subtasks: Subtask contexts (or dicts with id/name/keywords)
            selected_integrations: Integrations chosen by the user
            top_k: Number of recommendations (defaults to ``default_top_k``)
            subtask_id: Subtask the recommendations are for (cache scope)

        Returns:
            At most top_k recommendations in selection order

        Raises:
            CandidateStoreError: If the candidate store cannot be read
        """
        top_k = top_k if top_k is not None else self.settings.default_top_k
        cache_key = build_cache_key(
            self.settings.cache_key_prefix,
            task_text,
            subtask_id,
            top_k,
            selected_integrations,
        )

        cached = self._cache_get(cache_key)
        if cached is not None:
            logger.info("Recommendation cache hit", extra={"cache_key": cache_key})
            return cached[:top_k]

        recommendations = self.strategy.recommend(
            task_text,
            _to_subtask_contexts(subtasks),
            list(selected_integrations or []),
            top_k,
        )

        self._cache_set(cache_key, recommendations)
        logger.info(
            "Recommendations computed",
            extra={
                "strategy": self.strategy.name,
                "returned": len(recommendations),
                "top_k": top_k,
            },
        )
        return recommendations

    def invalidate(
        self,
        task_text: str,
        subtask_id: Optional[str] = None,
        selected_integrations: Optional[Sequence[str]] = None,
        top_k: Optional[int] = None,
    ) -> None:
        """Drop cached recommendations for one task, subtask and request shape."""
        top_k = top_k if top_k is not None else self.settings.default_top_k
        cache_key = build_cache_key(
            self.settings.cache_key_prefix,
            task_text,
            subtask_id,
            top_k,
            selected_integrations,
        )
        try:
            self.cache.delete(cache_key)
        except Exception as e:
            logger.warning(f"Cache delete failed, ignoring: {e}")

    def _cache_get(self, cache_key: str) -> Optional[List[ScoredRecommendation]]:
        try:
            payload: Any = self.cache.get(cache_key)
            if payload is None:
                return None
            return [ScoredRecommendation.model_validate(item) for item in payload]
        except (ValidationError, TypeError) as e:
            logger.warning(f"Ignoring unreadable cache entry {cache_key}: {e}")
            return None
        except Exception as e:
            logger.warning(f"Cache read failed, ignoring: {e}")
            return None

    def _cache_set(self, cache_key: str, recommendations: List[ScoredRecommendation]) -> None:
        payload = [rec.model_dump(mode="json", by_alias=True) for rec in recommendations]
        try:
            self.cache.set(cache_key, payload, self.settings.recommendation_cache_ttl_ms)
        except Exception as e:
            logger.warning(f"Cache write failed, ignoring: {e}")
