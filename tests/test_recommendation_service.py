"""
Recommendation Service Tests for the Automation Advisor.

Tests for RecommendationService and the recommendation strategies:
- Cache short-circuit and cache write
- Cache failures ignored, store failures propagated
- Unified and legacy strategy behaviour

Run with:
    pytest tests/test_recommendation_service.py -v
"""

import pytest
from unittest.mock import MagicMock


def _rows():
    return [
        {
            "id": "w1",
            "title": "Invoice sync",
            "category": "other",
            "complexity": "Low",
            "source": "n8n.io",
            "integrations": ["Gmail"],
        },
        {
            "id": "w2",
            "title": "Nothing relevant",
            "category": "other",
            "complexity": "Low",
            "source": "n8n.io",
        },
    ]


# ============================================================================
# Cache Key Tests
# ============================================================================

class TestCacheKey:
    """Tests for build_cache_key."""

    def test_task_scope(self):
        """Test the whole-task key ends with 'all'."""
        from automation_advisor.solutions.recommendation_service import build_cache_key

        key = build_cache_key("advisor", "Rechnungen erfassen")

        assert key.startswith("advisor:recommendations:")
        assert key.endswith(":all")

    def test_subtask_scope(self):
        """Test the subtask key ends with the subtask id."""
        from automation_advisor.solutions.recommendation_service import build_cache_key

        assert build_cache_key("advisor", "Rechnungen erfassen", "st-3").endswith(":st-3")

    def test_task_text_changes_key(self):
        """Test different tasks never share a key."""
        from automation_advisor.solutions.recommendation_service import build_cache_key

        assert build_cache_key("advisor", "a") != build_cache_key("advisor", "b")
        assert build_cache_key("advisor", "a") == build_cache_key("advisor", "a")

    def test_top_k_changes_key(self):
        """Test requests for a different number of results never share a key."""
        from automation_advisor.solutions.recommendation_service import build_cache_key

        assert build_cache_key("advisor", "a", top_k=6) != build_cache_key("advisor", "a", top_k=2)

    def test_integrations_change_key(self):
        """Test the selected integrations are part of the key."""
        from automation_advisor.solutions.recommendation_service import build_cache_key

        gmail = build_cache_key("advisor", "a", top_k=6, selected_integrations=["Gmail"])
        slack = build_cache_key("advisor", "a", top_k=6, selected_integrations=["Slack"])

        assert gmail != slack
        assert gmail != build_cache_key("advisor", "a", top_k=6)

    def test_integration_order_and_synonyms_share_key(self):
        """Test integrations are normalized and sorted before hashing."""
        from automation_advisor.solutions.recommendation_service import build_cache_key

        first = build_cache_key("advisor", "a", top_k=6, selected_integrations=["Sheets", "Postgres"])
        second = build_cache_key("advisor", "a", top_k=6, selected_integrations=["postgresql", "google sheets"])

        assert first == second


# ============================================================================
# Service Cache Tests
# ============================================================================

class TestRecommendationServiceCache:
    """Tests for the cache handling of RecommendationService."""

    def test_cache_hit_short_circuits(self, mock_cache, make_recommendation):
        """Test a cache hit returns cached results without scoring."""
        from automation_advisor.solutions.recommendation_service import RecommendationService

        cached = make_recommendation("cached", 0.8)
        mock_cache.get.return_value = [cached.model_dump(mode="json", by_alias=True)]
        strategy = MagicMock()

        result = RecommendationService(strategy=strategy, cache=mock_cache).recommend("Task")

        strategy.recommend.assert_not_called()
        assert [rec.solution.id for rec in result] == ["cached"]
        assert result[0].score == pytest.approx(0.8)

    def test_cache_miss_writes_result(self, mock_cache, mock_store):
        """Test a miss runs the strategy and caches the filtered result."""
        from automation_advisor.solutions.recommendation_service import RecommendationService
        from automation_advisor.solutions.strategies import UnifiedRecommendationStrategy

        mock_store.fetch_active_solutions.return_value = _rows()
        service = RecommendationService(
            strategy=UnifiedRecommendationStrategy(store=mock_store),
            cache=mock_cache,
        )

        result = service.recommend("Invoice processing", selected_integrations=["gmail"], top_k=6)

        assert [rec.solution.id for rec in result] == ["w1"]
        assert result[0].score == pytest.approx(0.5)
        mock_store.fetch_active_solutions.assert_called_once_with(1000)

        key, payload, ttl_ms = mock_cache.set.call_args[0]
        assert key.endswith(":all")
        assert payload[0]["solution"]["id"] == "w1"
        assert ttl_ms == 7 * 24 * 60 * 60 * 1000

    def test_cache_read_failure_ignored(self, mock_cache):
        """Test a failing cache read falls through to the strategy."""
        from automation_advisor.solutions.recommendation_service import RecommendationService

        mock_cache.get.side_effect = ConnectionError("redis down")
        strategy = MagicMock()
        strategy.recommend.return_value = []

        result = RecommendationService(strategy=strategy, cache=mock_cache).recommend("Task")

        assert result == []
        strategy.recommend.assert_called_once()

    def test_cache_write_failure_ignored(self, mock_cache, make_recommendation):
        """Test a failing cache write still returns the result."""
        from automation_advisor.solutions.recommendation_service import RecommendationService

        mock_cache.set.side_effect = ConnectionError("redis down")
        strategy = MagicMock()
        strategy.recommend.return_value = [make_recommendation("w1", 0.6)]

        result = RecommendationService(strategy=strategy, cache=mock_cache).recommend("Task")

        assert [rec.solution.id for rec in result] == ["w1"]

    def test_unreadable_cache_entry_ignored(self, mock_cache):
        """Test a cache entry of the wrong shape is treated as a miss."""
        from automation_advisor.solutions.recommendation_service import RecommendationService

        mock_cache.get.return_value = [{"unexpected": True}]
        strategy = MagicMock()
        strategy.recommend.return_value = []

        RecommendationService(strategy=strategy, cache=mock_cache).recommend("Task")

        strategy.recommend.assert_called_once()

    def test_subtask_dicts_and_scope(self, mock_cache):
        """Test subtask dicts are accepted and the subtask id scopes the cache key."""
        from automation_advisor.models.solutions import SubtaskContext
        from automation_advisor.solutions.recommendation_service import RecommendationService

        strategy = MagicMock()
        strategy.recommend.return_value = []

        RecommendationService(strategy=strategy, cache=mock_cache).recommend(
            "Task",
            subtasks=[{"id": "st-1", "name": "Scan", "keywords": ["pdf"]}],
            subtask_id="st-1",
            top_k=3,
        )

        task_text, subtasks, integrations, top_k = strategy.recommend.call_args[0]
        assert isinstance(subtasks[0], SubtaskContext)
        assert subtasks[0].keywords == ["pdf"]
        assert integrations == []
        assert top_k == 3
        assert mock_cache.get.call_args[0][0].endswith(":st-1")

    def test_default_top_k(self, mock_cache):
        """Test top_k defaults to the configured value."""
        from automation_advisor.solutions.recommendation_service import RecommendationService

        strategy = MagicMock()
        strategy.recommend.return_value = []

        RecommendationService(strategy=strategy, cache=mock_cache).recommend("Task")

        assert strategy.recommend.call_args[0][3] == 6

    def test_invalidate(self, mock_cache):
        """Test invalidation deletes the task key."""
        from automation_advisor.solutions.recommendation_service import (
            RecommendationService,
            build_cache_key,
        )

        RecommendationService(strategy=MagicMock(), cache=mock_cache).invalidate("Task", "st-2")

        mock_cache.delete.assert_called_once_with(build_cache_key("advisor", "Task", "st-2", top_k=6))


# ============================================================================
# Cache Scope Tests
# ============================================================================

class DictCache:
    """In-memory stand-in for the Redis cache client."""

    def __init__(self):
        self.values = {}

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value, ttl_ms):
        self.values[key] = value
        return True

    def delete(self, key):
        return self.values.pop(key, None) is not None


class TestRecommendationCacheScope:
    """Tests for cached results across differently shaped requests."""

    def _service(self, mock_store):
        from automation_advisor.solutions.recommendation_service import RecommendationService
        from automation_advisor.solutions.strategies import UnifiedRecommendationStrategy

        mock_store.fetch_active_solutions.return_value = [
            {"id": f"w{i}", "title": f"Invoice flow {i}", "category": "other", "complexity": "Low"}
            for i in range(10)
        ]
        return RecommendationService(
            strategy=UnifiedRecommendationStrategy(store=mock_store),
            cache=DictCache(),
        )

    def test_smaller_top_k_after_larger(self, mock_store):
        """Test a second call with a smaller top_k returns at most top_k items."""
        service = self._service(mock_store)

        assert len(service.recommend("Invoice", top_k=6)) == 6
        assert len(service.recommend("Invoice", top_k=2)) == 2
        assert len(service.recommend("Invoice", top_k=6)) == 6
        assert mock_store.fetch_active_solutions.call_count == 2

    def test_different_integrations_recomputed(self, mock_store):
        """Test results cached for one integration set are not served for another."""
        service = self._service(mock_store)

        service.recommend("Invoice", selected_integrations=["Gmail"], top_k=3)
        service.recommend("Invoice", selected_integrations=["Slack"], top_k=3)
        service.recommend("Invoice", selected_integrations=["gmail"], top_k=3)

        assert mock_store.fetch_active_solutions.call_count == 2

    def test_cache_hit_truncated_to_top_k(self, mock_cache, make_recommendation):
        """Test an oversized cache entry is cut to top_k."""
        from automation_advisor.solutions.recommendation_service import RecommendationService

        mock_cache.get.return_value = [
            make_recommendation(f"w{i}", 0.9 - i / 10).model_dump(mode="json", by_alias=True)
            for i in range(5)
        ]

        result = RecommendationService(strategy=MagicMock(), cache=mock_cache).recommend("Task", top_k=2)

        assert [rec.solution.id for rec in result] == ["w0", "w1"]

    def test_invalidate_matches_recommend_key(self, mock_store):
        """Test invalidation removes the entry written for the same request."""
        service = self._service(mock_store)

        service.recommend("Invoice", selected_integrations=["Gmail"], top_k=3, subtask_id="st-1")
        service.invalidate("Invoice", "st-1", selected_integrations=["Gmail"], top_k=3)

        assert service.cache.values == {}


# ============================================================================
# Store Failure Tests
# ============================================================================

class TestStoreFailures:
    """Tests for candidate store errors."""

    def test_store_error_propagates(self, mock_cache, mock_store):
        """Test store failures reach the caller and nothing is cached."""
        from automation_advisor.exceptions import CandidateStoreError
        from automation_advisor.solutions.recommendation_service import RecommendationService
        from automation_advisor.solutions.strategies import UnifiedRecommendationStrategy

        mock_store.fetch_active_solutions.side_effect = CandidateStoreError("Failed to load")
        service = RecommendationService(
            strategy=UnifiedRecommendationStrategy(store=mock_store),
            cache=mock_cache,
        )

        with pytest.raises(CandidateStoreError):
            service.recommend("Task")

        mock_cache.set.assert_not_called()


# ============================================================================
# Strategy Tests
# ============================================================================

class TestStrategies:
    """Tests for the unified and legacy strategies."""

    def test_unified_skips_malformed_rows(self, mock_store):
        """Test rows that fail validation are skipped."""
        from automation_advisor.solutions.strategies import UnifiedRecommendationStrategy

        mock_store.fetch_active_solutions.return_value = _rows() + [{"id": "bad", "tags": "not-a-list"}]

        result = UnifiedRecommendationStrategy(store=mock_store).recommend(
            "Invoice processing", [], ["gmail"], 6,
        )

        assert [rec.solution.id for rec in result] == ["w1"]

    def test_unified_empty_store(self, mock_store):
        """Test an empty store yields no recommendations."""
        from automation_advisor.solutions.strategies import UnifiedRecommendationStrategy

        assert UnifiedRecommendationStrategy(store=mock_store).recommend("Task", [], [], 6) == []

    def test_unified_respects_top_k(self, mock_store):
        """Test at most top_k recommendations are returned."""
        from automation_advisor.solutions.strategies import UnifiedRecommendationStrategy

        mock_store.fetch_active_solutions.return_value = [
            {"id": f"w{i}", "title": f"Invoice flow {i}", "category": "other", "complexity": "Low"}
            for i in range(10)
        ]

        result = UnifiedRecommendationStrategy(store=mock_store).recommend("Invoice", [], [], 3)

        assert len(result) == 3
        assert len({rec.solution.id for rec in result}) == 3

    def test_legacy_flattens_and_scores(self, mock_store):
        """Test legacy rows are flattened, stamped with their source and filtered."""
        from automation_advisor.solutions.strategies import LegacyRecommendationStrategy

        mock_store.fetch_legacy_cache_rows.return_value = [
            {
                "source": "github",
                "workflows": [
                    {"id": "w1", "name": "Invoice sync", "integrations": ["Gmail"]},
                    {"id": "w2", "name": "Unrelated"},
                ],
            },
            {"source": "n8n.io", "workflows": None},
        ]

        result = LegacyRecommendationStrategy(store=mock_store).recommend(
            "Invoice processing", [], ["gmail"], 6,
        )

        assert [rec.solution.id for rec in result] == ["w1"]
        assert result[0].score == pytest.approx(0.5)
        assert result[0].solution.source == "github"
        assert result[0].solution.name == "Invoice sync"

    @pytest.mark.parametrize("unified,expected", [(True, "unified"), (False, "legacy")])
    def test_strategy_selection(self, mock_store, unified, expected):
        """Test the strategy is chosen from the flag."""
        from automation_advisor.solutions.strategies import get_recommendation_strategy

        assert get_recommendation_strategy(unified, store=mock_store).name == expected

    def test_strategy_from_env(self, monkeypatch, mock_cache):
        """Test UNIFIED_WORKFLOW_READ=false selects the legacy strategy."""
        from automation_advisor.config.settings import get_settings
        from automation_advisor.solutions.recommendation_service import RecommendationService

        monkeypatch.setenv("UNIFIED_WORKFLOW_READ", "false")
        get_settings.cache_clear()

        service = RecommendationService(cache=mock_cache)

        assert service.strategy.name == "legacy"
