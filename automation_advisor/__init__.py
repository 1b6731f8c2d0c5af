"""
Automation Advisor - Task Automation Analysis and Workflow Recommendation

This package estimates how automatable the tasks of a job description are
and recommends pre-built automation workflows for them:

- Job description parsing (one completion call, deterministic fallback)
- Keyword-based task classification and automation scoring
- ROI aggregation with localized summary and recommendations
- Heuristic solution scoring with MMR diversification

Architecture:
    - analysis/: Detectors, scorers, job parser, aggregator, pipeline
    - solutions/: Solution scoring, MMR, strategies, recommendation service
    - models/: Shared data models (Pydantic)
    - catalog/: Keyword tables and AI tool catalog
    - config/: Configuration management
    - clients/: External service clients (LLM, candidate store, Redis)

Usage:
    from automation_advisor.analysis import create_analysis_pipeline
    result = await create_analysis_pipeline().run_analysis(job_text, lang="de")

    from automation_advisor.solutions import RecommendationService
    recommendations = RecommendationService().recommend(task_text, top_k=6)
"""

__version__ = "0.1.0"

from automation_advisor.models.analysis import (
    Task,
    TaskDescriptor,
    TaskLabel,
    AnalysisResult,
)
from automation_advisor.models.solutions import (
    CandidateSolution,
    SubtaskContext,
    ScoredRecommendation,
)
from automation_advisor.exceptions import (
    AdvisorError,
    ConfigurationError,
    EmptyExtractionError,
    AnalysisFailedError,
    CandidateStoreError,
)

__all__ = [
    # Analysis
    "Task",
    "TaskDescriptor",
    "TaskLabel",
    "AnalysisResult",
    # Solutions
    "CandidateSolution",
    "SubtaskContext",
    "ScoredRecommendation",
    # Errors
    "AdvisorError",
    "ConfigurationError",
    "EmptyExtractionError",
    "AnalysisFailedError",
    "CandidateStoreError",
]
