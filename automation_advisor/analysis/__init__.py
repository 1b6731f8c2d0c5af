"""
Analysis package for the Automation Advisor.

Contains:
- industry_detector: Keyword-based industry and category detection
- automation_scorer: Automation potential scoring
- task_classifier: Task classification and descriptor conversion
- job_parser: Job description parsing (single completion call)
- roi_aggregator: Result aggregation, summary and recommendations
- pipeline: Stage orchestration
"""

from automation_advisor.analysis.industry_detector import detect_industry, detect_task_category
from automation_advisor.analysis.automation_scorer import (
    calculate_automation_potential,
    round_half_up,
)
from automation_advisor.analysis.task_classifier import (
    TaskClassifier,
    label_for_score,
    complexity_for_score,
)
from automation_advisor.analysis.job_parser import JobParser, detect_context_category
from automation_advisor.analysis.roi_aggregator import (
    ROIAggregator,
    overall_automation_potential,
    actual_automation_potential,
)
from automation_advisor.analysis.pipeline import AnalysisPipeline, create_analysis_pipeline

__all__ = [
    "detect_industry",
    "detect_task_category",
    "calculate_automation_potential",
    "round_half_up",
    "TaskClassifier",
    "label_for_score",
    "complexity_for_score",
    "JobParser",
    "detect_context_category",
    "ROIAggregator",
    "overall_automation_potential",
    "actual_automation_potential",
    "AnalysisPipeline",
    "create_analysis_pipeline",
]
