"""
Models package for the Automation Advisor.

Contains Pydantic models for:
- analysis: Task descriptors, classified tasks and analysis results
- solutions: Candidate solutions and scored recommendations
"""

from automation_advisor.models.analysis import (
    TaskLabel,
    Complexity,
    AutomationTrend,
    Priority,
    EmploymentType,
    Subtask,
    BusinessCase,
    TaskDescriptor,
    Task,
    AutomationRatio,
    AnalysisResult,
)
from automation_advisor.models.solutions import (
    CandidateSolution,
    SubtaskContext,
    SolutionMatch,
    ScoredRecommendation,
)

__all__ = [
    # Analysis
    "TaskLabel",
    "Complexity",
    "AutomationTrend",
    "Priority",
    "EmploymentType",
    "Subtask",
    "BusinessCase",
    "TaskDescriptor",
    "Task",
    "AutomationRatio",
    "AnalysisResult",
    # Solutions
    "CandidateSolution",
    "SubtaskContext",
    "SolutionMatch",
    "ScoredRecommendation",
]
