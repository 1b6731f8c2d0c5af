"""
Analysis pipeline.

Orchestrates the three analysis stages:

    job_parsing          → JobParser.parse_job_description
    task_classification  → TaskClassifier.task_from_descriptor
    roi_aggregation      → ROIAggregator.aggregate_results

Every stage is reported to the injected observer. Any failure is
re-raised as AnalysisFailedError with a remediation checklist.
"""

import logging
import uuid
from typing import Optional

from automation_advisor.analysis.job_parser import JobParser
from automation_advisor.analysis.roi_aggregator import ROIAggregator
from automation_advisor.analysis.task_classifier import TaskClassifier
from automation_advisor.exceptions import AnalysisFailedError
from automation_advisor.models.analysis import AnalysisResult
from automation_advisor.monitoring import LoggingPipelineObserver, PipelineObserver, StageContext

logger = logging.getLogger(__name__)

STAGE_JOB_PARSING = "job_parsing"
STAGE_TASK_CLASSIFICATION = "task_classification"
STAGE_ROI_AGGREGATION = "roi_aggregation"


class AnalysisPipeline:
    """
    Runs job parsing, task conversion and aggregation for a job text.

    Example:
        pipeline = create_analysis_pipeline()
        result = await pipeline.run_analysis(job_text, lang="de")
    """

    def __init__(
        self,
        job_parser: JobParser,
        task_classifier: TaskClassifier,
        roi_aggregator: ROIAggregator,
        observer: Optional[PipelineObserver] = None,
    ):
        self.job_parser = job_parser
        self.task_classifier = task_classifier
        self.roi_aggregator = roi_aggregator
        self.observer = observer

    async def run_analysis(self, job_text: str, lang: str = "de") -> AnalysisResult:
        """
        Analyse a job description.

        Args:
            job_text: Job description
            lang: Language of the analysis (de or en)

        Returns:
            AnalysisResult

        Raises:
            AnalysisFailedError: If any stage fails
        """
        analysis_id = str(uuid.uuid4())
        observer = self.observer or LoggingPipelineObserver(analysis_id)

        logger.info(
            "Starting analysis pipeline",
            extra={"analysis_id": analysis_id, "lang": lang},
        )

        try:
            with StageContext(STAGE_JOB_PARSING, observer) as stage:
                descriptors = await self.job_parser.parse_job_description(job_text, lang)
                stage.result = descriptors

            with StageContext(STAGE_TASK_CLASSIFICATION, observer) as stage:
                tasks = [
                    self.task_classifier.task_from_descriptor(descriptor)
                    for descriptor in descriptors
                ]
                stage.result = tasks

            with StageContext(STAGE_ROI_AGGREGATION, observer) as stage:
                result = self.roi_aggregator.aggregate_results(tasks, job_text, lang)
                stage.result = result

        except Exception as e:
            logger.error(
                f"Analysis pipeline failed: {e}",
                extra={"analysis_id": analysis_id, "error_type": type(e).__name__},
            )
            raise AnalysisFailedError(e) from e

        logger.info(
            "Analysis pipeline completed",
            extra={
                "analysis_id": analysis_id,
                "task_count": result.task_count,
                "total_score": result.total_score,
            },
        )
        return result


def create_analysis_pipeline(observer: Optional[PipelineObserver] = None) -> AnalysisPipeline:
    """Create a pipeline wired with the default components."""
    return AnalysisPipeline(
        job_parser=JobParser(),
        task_classifier=TaskClassifier(),
        roi_aggregator=ROIAggregator(),
        observer=observer,
    )
