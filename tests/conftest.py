"""
Pytest configuration and shared fixtures for Automation Advisor tests.

This file provides:
- Mock clients for the completion service, candidate store and Redis cache
- Test data factories for tasks and candidate solutions
- Singleton/settings reset between tests
"""

import pytest
from unittest.mock import MagicMock, AsyncMock


# ============================================================================
# Settings / Singleton Reset
# ============================================================================

@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Isolate every test from env configuration and cached clients."""
    from automation_advisor.config.settings import get_settings
    from automation_advisor.clients.llm_client import reset_llm_client
    from automation_advisor.clients.cache_client import reset_cache_client
    from automation_advisor.clients.candidate_store_client import reset_candidate_store_client

    monkeypatch.delenv("LLM_API_KEY", raising=False)
    monkeypatch.delenv("UNIFIED_WORKFLOW_READ", raising=False)
    get_settings.cache_clear()
    yield
    reset_llm_client()
    reset_cache_client()
    reset_candidate_store_client()
    get_settings.cache_clear()


# ============================================================================
# Mock Client Fixtures
# ============================================================================

@pytest.fixture
def mock_llm():
    """Mock completion client (configured, returns no tasks until set)."""
    mock_client = MagicMock()
    mock_client.is_configured.return_value = True
    mock_client.analyze_job_description = AsyncMock(return_value={"tasks": []})
    return mock_client


@pytest.fixture
def mock_store():
    """Mock candidate store client."""
    mock_client = MagicMock()
    mock_client.fetch_active_solutions.return_value = []
    mock_client.fetch_legacy_cache_rows.return_value = []
    return mock_client


@pytest.fixture
def mock_cache():
    """Mock recommendation cache (always a miss)."""
    mock_client = MagicMock()
    mock_client.get.return_value = None
    mock_client.set.return_value = True
    mock_client.delete.return_value = True
    return mock_client


# ============================================================================
# Test Data Fixtures
# ============================================================================

@pytest.fixture
def make_task():
    """Factory for classified tasks with a label consistent with the score."""
    from automation_advisor.models.analysis import Task
    from automation_advisor.analysis.task_classifier import label_for_score

    def _make(score, industry="general", ai_tools=None, text=None):
        return Task(
            text=text or f"Task with score {score}",
            score=score,
            label=label_for_score(score),
            industry=industry,
            category="general",
            ai_tools=ai_tools or [],
        )

    return _make


@pytest.fixture
def make_candidate():
    """Factory for candidate solutions with neutral defaults."""
    from automation_advisor.models.solutions import CandidateSolution

    def _make(id="wf-1", **overrides):
        data = {
            "id": id,
            "title": "Neutral workflow",
            "description": "",
            "category": "other",
            "complexity": "Low",
            "source": "n8n.io",
            "integrations": [],
        }
        data.update(overrides)
        return CandidateSolution(**data)

    return _make


@pytest.fixture
def make_recommendation(make_candidate):
    """Factory for scored recommendations."""
    from automation_advisor.models.solutions import ScoredRecommendation

    def _make(id, score, **candidate_overrides):
        return ScoredRecommendation(
            solution=make_candidate(id=id, **candidate_overrides),
            score=score,
            reason="test",
            confidence=0.5,
        )

    return _make


@pytest.fixture
def hr_job_text():
    """Sample German HR job description."""
    return (
        "HR Manager (m/w/d)\n"
        "- Personalakten verwalten und Mitarbeiter betreuen\n"
        "- Gehaltsabrechnung vorbereiten\n"
        "- Schulungen organisieren"
    )


@pytest.fixture
def llm_scenario_response():
    """Completion response with three tasks rated 85/60/20."""
    return {
        "tasks": [
            {"text": "Rechnungen erfassen", "automationPotential": 85, "category": "admin",
             "reasoning": "Strukturierte Daten"},
            {"text": "Lieferanten abstimmen", "automationPotential": 60, "category": "comm",
             "reasoning": "Teilweise standardisiert"},
            {"text": "Team motivieren", "automationPotential": 20, "category": "mgmt",
             "reasoning": "Menschliche Führung"},
        ],
        "summary": "Drei Aufgaben",
    }


# ============================================================================
# Markers
# ============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
