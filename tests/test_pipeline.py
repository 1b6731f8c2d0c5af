"""
Pipeline Tests for the Automation Advisor.

Tests for AnalysisPipeline:
- Stage ordering reported to the observer
- End-to-end result for a mocked completion response
- Error wrapping with the remediation checklist

Run with:
    pytest tests/test_pipeline.py -v
"""

import logging

import pytest


class RecordingObserver:
    """Observer recording stage events in order."""

    def __init__(self):
        self.events = []

    def on_stage_start(self, name):
        self.events.append(("start", name))

    def on_stage_end(self, name, result, ok):
        self.events.append(("end", name, ok))


def _pipeline(mock_llm, observer=None):
    from automation_advisor.analysis.job_parser import JobParser
    from automation_advisor.analysis.pipeline import AnalysisPipeline
    from automation_advisor.analysis.roi_aggregator import ROIAggregator
    from automation_advisor.analysis.task_classifier import TaskClassifier

    return AnalysisPipeline(
        job_parser=JobParser(llm_client=mock_llm, timeout_seconds=5.0),
        task_classifier=TaskClassifier(),
        roi_aggregator=ROIAggregator(),
        observer=observer,
    )


# ============================================================================
# Success Path Tests
# ============================================================================

class TestPipelineSuccess:
    """Tests for successful pipeline runs."""

    @pytest.mark.asyncio
    async def test_stage_order(self, mock_llm, llm_scenario_response):
        """Test the observer sees each stage start and end in order."""
        mock_llm.analyze_job_description.return_value = llm_scenario_response
        observer = RecordingObserver()

        await _pipeline(mock_llm, observer).run_analysis("Job", lang="de")

        assert observer.events == [
            ("start", "job_parsing"),
            ("end", "job_parsing", True),
            ("start", "task_classification"),
            ("end", "task_classification", True),
            ("start", "roi_aggregation"),
            ("end", "roi_aggregation", True),
        ]

    @pytest.mark.asyncio
    async def test_scenario_result(self, mock_llm, llm_scenario_response):
        """Test the 85/60/20 scenario end to end."""
        mock_llm.analyze_job_description.return_value = llm_scenario_response

        result = await _pipeline(mock_llm, RecordingObserver()).run_analysis("Buchhalter", lang="de")

        assert result.total_score == 55
        assert result.ratio.automatisierbar == 55
        assert result.ratio.mensch == 45
        assert [t.label.value for t in result.tasks] == [
            "Automatisierbar", "Teilweise Automatisierbar", "Mensch",
        ]
        assert [t.category for t in result.tasks] == ["admin", "comm", "mgmt"]
        assert all(t.confidence == pytest.approx(0.9) for t in result.tasks)
        assert result.summary == "Analyse mit 55% Automatisierungspotenzial (mittel) für 3 Aufgaben"
        assert 1 <= len(result.recommendations) <= 8
        assert result.original_text == "Buchhalter"

    @pytest.mark.asyncio
    async def test_fallback_result(self, mock_llm):
        """Test a failing completion call still yields a single low-confidence task."""
        mock_llm.analyze_job_description.side_effect = RuntimeError("boom")

        result = await _pipeline(mock_llm, RecordingObserver()).run_analysis("Lagerist", lang="en")

        assert result.task_count == 1
        assert result.tasks[0].confidence == pytest.approx(0.3)
        assert result.total_score == 50
        assert result.summary.startswith("Analysis of 1 identified tasks")

    @pytest.mark.asyncio
    async def test_default_observer_logs_stages(self, mock_llm, llm_scenario_response, caplog):
        """Test the default observer logs stage completion."""
        mock_llm.analyze_job_description.return_value = llm_scenario_response

        with caplog.at_level(logging.INFO, logger="automation_advisor.monitoring"):
            await _pipeline(mock_llm).run_analysis("Job")

        messages = [record.getMessage() for record in caplog.records]
        assert "Starting stage: job_parsing" in messages
        assert "Completed stage: roi_aggregation (success)" in messages

    @pytest.mark.asyncio
    async def test_out_of_range_potentials_clamped(self, mock_llm):
        """Test service potentials outside 0-100 never leave the score range."""
        mock_llm.analyze_job_description.return_value = {
            "tasks": [
                {"text": "Rechnungen erfassen", "automationPotential": 140},
                {"text": "Team motivieren", "automationPotential": -20},
            ]
        }

        result = await _pipeline(mock_llm, RecordingObserver()).run_analysis("Buchhalter")

        assert [t.score for t in result.tasks] == [100, 0]
        assert [t.automation_ratio for t in result.tasks] == [100, 0]
        assert [t.human_ratio for t in result.tasks] == [0, 100]
        assert [t.label.value for t in result.tasks] == ["Automatisierbar", "Mensch"]
        assert result.total_score == 50
        assert result.ratio.automatisierbar + result.ratio.mensch == 100


# ============================================================================
# Failure Path Tests
# ============================================================================

class TestPipelineFailure:
    """Tests for failures surfaced by the pipeline."""

    @pytest.mark.asyncio
    async def test_configuration_error_wrapped(self, mock_llm):
        """Test an unconfigured service surfaces as AnalysisFailedError."""
        from automation_advisor.exceptions import AnalysisFailedError, ConfigurationError

        mock_llm.is_configured.return_value = False
        observer = RecordingObserver()

        with pytest.raises(AnalysisFailedError) as exc_info:
            await _pipeline(mock_llm, observer).run_analysis("Job")

        error = exc_info.value
        assert isinstance(error.cause, ConfigurationError)
        assert "Please check" in str(error)
        assert "LLM_API_KEY" in str(error)
        assert observer.events == [
            ("start", "job_parsing"),
            ("end", "job_parsing", False),
        ]

    @pytest.mark.asyncio
    async def test_empty_extraction_wrapped(self, mock_llm):
        """Test an empty task list surfaces as AnalysisFailedError."""
        from automation_advisor.exceptions import AnalysisFailedError, EmptyExtractionError

        mock_llm.analyze_job_description.return_value = {"tasks": []}

        with pytest.raises(AnalysisFailedError) as exc_info:
            await _pipeline(mock_llm, RecordingObserver()).run_analysis("Job")

        assert isinstance(exc_info.value.cause, EmptyExtractionError)
        assert "no tasks extracted" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_aggregation_error_wrapped(self, mock_llm, llm_scenario_response):
        """Test a failing later stage is reported and wrapped."""
        from unittest.mock import MagicMock
        from automation_advisor.exceptions import AnalysisFailedError

        mock_llm.analyze_job_description.return_value = llm_scenario_response
        observer = RecordingObserver()
        pipeline = _pipeline(mock_llm, observer)
        pipeline.roi_aggregator = MagicMock()
        pipeline.roi_aggregator.aggregate_results.side_effect = ValueError("bad tasks")

        with pytest.raises(AnalysisFailedError) as exc_info:
            await pipeline.run_analysis("Job")

        assert isinstance(exc_info.value.cause, ValueError)
        assert observer.events[-1] == ("end", "roi_aggregation", False)


# ============================================================================
# Factory Tests
# ============================================================================

class TestPipelineFactory:
    """Tests for create_analysis_pipeline."""

    def test_factory_wires_components(self):
        """Test the factory creates all default components."""
        from automation_advisor.analysis.job_parser import JobParser
        from automation_advisor.analysis.pipeline import create_analysis_pipeline
        from automation_advisor.analysis.roi_aggregator import ROIAggregator
        from automation_advisor.analysis.task_classifier import TaskClassifier

        observer = RecordingObserver()
        pipeline = create_analysis_pipeline(observer=observer)

        assert isinstance(pipeline.job_parser, JobParser)
        assert isinstance(pipeline.task_classifier, TaskClassifier)
        assert isinstance(pipeline.roi_aggregator, ROIAggregator)
        assert pipeline.observer is observer
