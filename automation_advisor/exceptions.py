"""Exceptions raised by the Automation Advisor."""

from typing import Optional

ANALYSIS_CHECKLIST = (
    "1. LLM API key is configured correctly (LLM_API_KEY)",
    "2. Internet connection is available",
    "3. The completion service is reachable",
    "4. The job description contains enough content",
)


class AdvisorError(Exception):
    """Base class for all Automation Advisor errors."""

    code = "ADVISOR_ERROR"


class ConfigurationError(AdvisorError):
    """The completion service is not configured."""

    code = "CONFIGURATION_ERROR"

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Completion service not configured. Please supply the LLM API key "
            "(set LLM_API_KEY in the environment or .env)."
        )


class EmptyExtractionError(AdvisorError):
    """The completion call succeeded but yielded no tasks."""

    code = "EMPTY_EXTRACTION"

    def __init__(self, message: str = "AI analysis failed - no tasks extracted"):
        super().__init__(message)


class TransientCompletionError(AdvisorError):
    """
    The completion call raised or timed out.

    Recovered locally by the job parser; never surfaced to callers.
    """

    code = "TRANSIENT_COMPLETION_ERROR"


class AnalysisFailedError(AdvisorError):
    """The analysis pipeline failed; carries a remediation checklist."""

    code = "ANALYSIS_FAILED"

    def __init__(self, cause: Exception):
        self.cause = cause
        checklist = "\n".join(ANALYSIS_CHECKLIST)
        super().__init__(f"AI analysis failed: {cause}. Please check:\n{checklist}")


class CandidateStoreError(AdvisorError):
    """The candidate store could not be read."""

    code = "CANDIDATE_STORE_ERROR"
