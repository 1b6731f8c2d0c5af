"""
Solution models for the Automation Advisor.

Candidate solutions ("workflows") are read in bulk from the candidate
store and are read-only within this package. Scoring wraps them into
ScoredRecommendation records that live for a single request.
"""

from typing import Any, List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SolutionModel(BaseModel):
    """Base model accepting both camelCase and snake_case field names."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CandidateSolution(SolutionModel):
    """
    A pre-built automation workflow evaluated for relevance to a task.

    Attributes:
        id: Store identifier
        title: Title (legacy rows call it ``name``)
        description: Description
        summary: Optional short summary
        source: Origin (github, n8n.io, ai-generated, manual, api)
        category: Category name
        tags: Free-form tags
        complexity: Low | Medium | High (legacy rows may use Easy/Hard)
        integrations: Integrated systems
        trigger_type: Manual | Webhook | Scheduled | Complex
        is_ai_generated: Generated by an LLM
        verified: Verified by a curator
        rating: Average rating (0-5)
        popularity: Popularity counter
        downloads: Download counter
        active: Whether the row is active
        status: Verification status
    """
    id: str = ""
    title: str = Field(default="", validation_alias=AliasChoices("title", "name"))
    description: str = ""
    summary: Optional[str] = None
    source: str = "manual"
    category: str = "general"
    tags: List[str] = Field(default_factory=list)
    complexity: str = "Medium"
    integrations: List[str] = Field(default_factory=list)
    trigger_type: Optional[str] = None
    is_ai_generated: bool = Field(
        default=False,
        validation_alias=AliasChoices("isAIGenerated", "isAiGenerated", "is_ai_generated"),
        serialization_alias="isAIGenerated",
    )
    verified: bool = False
    rating: Optional[float] = None
    popularity: Optional[float] = None
    downloads: Optional[float] = None
    active: bool = True
    status: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("tags", "integrations", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> List[str]:
        if value is None:
            return []
        return value

    @field_validator("title", "description", "category", "complexity", "source", mode="before")
    @classmethod
    def _none_to_default(cls, value: Any, info) -> Any:
        if value is not None:
            return value
        defaults = {"category": "general", "complexity": "Medium", "source": "manual"}
        return defaults.get(info.field_name, "")

    @field_validator("is_ai_generated", "verified", "active", mode="before")
    @classmethod
    def _none_to_false(cls, value: Any, info) -> bool:
        if value is None:
            return info.field_name == "active"
        return value

    @property
    def name(self) -> str:
        """Alias for title (legacy naming)."""
        return self.title

    @property
    def text(self) -> str:
        """Lower-cased searchable text of the solution."""
        return f"{self.title} {self.description} {self.summary or ''}".lower()


class SubtaskContext(SolutionModel):
    """
    Subtask context passed to the recommendation service.

    Attributes:
        id: Optional subtask identifier (used for the cache key)
        name: Subtask name
        keywords: Keywords describing the subtask
    """
    id: Optional[str] = None
    name: str = ""
    keywords: List[str] = Field(default_factory=list)


class SolutionMatch(SolutionModel):
    """
    Heuristic relevance of one candidate for a task context.

    Attributes:
        score: Relevance in [0, 1]
        reason: Comma-joined rationale fragments
        confidence: Evidence counter in [0, 1] (not a calibrated probability)
    """
    score: float = 0.0
    reason: str = "General match"
    confidence: float = 0.5


class ScoredRecommendation(SolutionModel):
    """
    A candidate solution with its relevance score.

    Attributes:
        solution: The candidate
        score: Relevance in [0, 1]
        reason: Comma-joined rationale fragments
        confidence: Evidence counter in [0, 1]
    """
    solution: CandidateSolution
    score: float
    reason: str = "General match"
    confidence: float = 0.5

    @classmethod
    def from_match(
        cls,
        solution: CandidateSolution,
        match: SolutionMatch,
    ) -> "ScoredRecommendation":
        """Create a recommendation from a scorer match."""
        return cls(
            solution=solution,
            score=match.score,
            reason=match.reason,
            confidence=match.confidence,
        )
