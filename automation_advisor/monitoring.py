"""
Pipeline monitoring for the Automation Advisor.

The analysis pipeline reports every stage to an injected observer:

    observer.on_stage_start("job_parsing")
    observer.on_stage_end("job_parsing", result, ok=True)

LoggingPipelineObserver is the default and logs stage timings.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class PipelineObserver(ABC):
    """Observer notified around each pipeline stage."""

    @abstractmethod
    def on_stage_start(self, name: str) -> None:
        """Called before a stage runs."""

    @abstractmethod
    def on_stage_end(self, name: str, result: Any, ok: bool) -> None:
        """Called after a stage finished (ok=False if it raised)."""


class LoggingPipelineObserver(PipelineObserver):
    """Logs stage start/end with the stage duration in milliseconds."""

    def __init__(self, analysis_id: Optional[str] = None):
        self.analysis_id = analysis_id
        self._started: Dict[str, float] = {}

    def on_stage_start(self, name: str) -> None:
        self._started[name] = time.monotonic()
        logger.info(
            f"Starting stage: {name}",
            extra={"stage": name, "analysis_id": self.analysis_id},
        )

    def on_stage_end(self, name: str, result: Any, ok: bool) -> None:
        started = self._started.pop(name, None)
        duration_ms = int((time.monotonic() - started) * 1000) if started is not None else None
        status = "success" if ok else "failed"
        log = logger.info if ok else logger.warning
        log(
            f"Completed stage: {name} ({status})",
            extra={
                "stage": name,
                "status": status,
                "duration_ms": duration_ms,
                "analysis_id": self.analysis_id,
            },
        )


class StageContext:
    """
    Context manager reporting one stage to an observer.

    Usage:
        with StageContext("roi_aggregation", observer) as stage:
            stage.result = aggregator.aggregate_results(tasks, text)
    """

    def __init__(self, name: str, observer: PipelineObserver):
        self.name = name
        self.observer = observer
        self.result: Any = None

    def __enter__(self):
        self.observer.on_stage_start(self.name)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        ok = exc_type is None
        self.observer.on_stage_end(self.name, self.result if ok else exc_val, ok)
        # Don't suppress exceptions
        return False
