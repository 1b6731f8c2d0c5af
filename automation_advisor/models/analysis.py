"""
Analysis models for the Automation Advisor.

These models define the records flowing through the analysis pipeline:

    job text → TaskDescriptor (job parser) → Task (classifier) → AnalysisResult

Field names are snake_case in Python; camelCase aliases are accepted on
input and produced by ``model_dump(by_alias=True)`` so the JSON returned
by the completion service validates directly.
"""

from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TaskLabel(str, Enum):
    """Automation label derived from a task score."""
    AUTOMATABLE = "Automatisierbar"
    PARTIALLY_AUTOMATABLE = "Teilweise Automatisierbar"
    HUMAN = "Mensch"


class Complexity(str, Enum):
    """Complexity band of a task or subtask."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AutomationTrend(str, Enum):
    """Direction automation of a task is heading."""
    INCREASING = "increasing"
    STABLE = "stable"
    DECREASING = "decreasing"


class Priority(str, Enum):
    """Subtask priority."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class EmploymentType(str, Enum):
    """Employment type used for the business case hourly rate."""
    EMPLOYEE = "employee"
    FREELANCER = "freelancer"


class AnalysisModel(BaseModel):
    """Base model accepting both camelCase and snake_case field names."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )


class Subtask(AnalysisModel):
    """
    A subtask generated by the completion service for a main task.

    Attributes:
        id: Subtask identifier
        title: Short title
        description: What the subtask involves
        automation_potential: 0-100 estimate
        estimated_time: Estimated time (hours per month as produced upstream)
        priority: low | medium | high | critical
        complexity: low | medium | high
        systems: Systems/tools touched by the subtask
        risks: Automation risks
        opportunities: Automation opportunities
        dependencies: Other subtasks or systems it depends on
    """
    id: str
    title: str
    description: str = ""
    automation_potential: float = 0
    estimated_time: float = 0
    priority: Priority = Priority.MEDIUM
    complexity: Complexity = Complexity.MEDIUM
    systems: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    dependencies: List[str] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return str(value)


class BusinessCase(AnalysisModel):
    """
    Cost/benefit estimate attached to a task.

    ``saved_hours == manual_hours - automated_hours`` is guaranteed by the
    producer and is not re-validated here.
    """
    manual_hours: float = 0
    automated_hours: float = 0
    automation_potential: Optional[float] = None
    saved_hours: float = 0
    setup_cost_hours: float = 0
    setup_cost_money: float = 0
    roi: float = 0
    payback_period_years: float = 0
    hourly_rate_employee: float = 0
    hourly_rate_freelancer: float = 0
    employment_type: EmploymentType = EmploymentType.EMPLOYEE
    reasoning: str = ""


class TaskDescriptor(AnalysisModel):
    """
    Raw task produced by the job parser, before classification.

    Attributes:
        text: Task text
        automation_potential: 0-100 estimate
        confidence: 0-100 (90 for LLM tasks, 30 for the fallback)
        category: Category name (LLM category or context-aware detection)
        pattern: How the descriptor was produced
        reasoning: Short justification
        subtasks: Subtasks generated in the same completion call
        business_case: Business case generated in the same completion call
        complexity: Complexity derived by the parser
        trend: Automation trend derived by the parser
    """
    text: str
    automation_potential: float = 50
    confidence: float = 90
    category: str = "general"
    pattern: str = "ai-single-call"
    reasoning: Optional[str] = None
    subtasks: List[Subtask] = Field(default_factory=list)
    business_case: Optional[BusinessCase] = None
    complexity: Complexity = Complexity.MEDIUM
    trend: AutomationTrend = AutomationTrend.INCREASING


class Task(AnalysisModel):
    """
    A classified, aggregation-ready task.

    Attributes:
        text: Task text
        score: Automation score (0-100)
        label: Automatisierbar | Teilweise Automatisierbar | Mensch
        signals: Reasoning fragments
        ai_tools: Catalog ids of AI tools suited to the task industry
        industry: Detected industry
        category: Detected category
        confidence: Classification confidence (0-1)
        automation_ratio: Automatable share (0-100)
        human_ratio: Human share (0-100)
        complexity: low | medium | high
        automation_trend: increasing | stable | decreasing
        subtasks: Subtasks (if any)
        business_case: Business case (if any)
    """
    text: str
    score: float
    label: TaskLabel
    signals: List[str] = Field(default_factory=list)
    ai_tools: List[str] = Field(default_factory=list)
    industry: Optional[str] = None
    category: Optional[str] = None
    confidence: float = 0.7
    automation_ratio: float = 0
    human_ratio: float = 100
    complexity: Complexity = Complexity.MEDIUM
    automation_trend: AutomationTrend = AutomationTrend.INCREASING
    subtasks: List[Subtask] = Field(default_factory=list)
    business_case: Optional[BusinessCase] = None


class AutomationRatio(AnalysisModel):
    """Automatable vs. human share of the analysed job (sums to 100)."""
    automatisierbar: int = 0
    mensch: int = 100


class AnalysisResult(AnalysisModel):
    """
    Terminal artifact of the analysis pipeline.

    Attributes:
        total_score: Rounded mean of task scores
        ratio: Automatable vs. human share
        tasks: Classified tasks
        summary: Localized summary sentence
        recommendations: Localized recommendations (at most 8)
        original_text: The analysed job text
    """
    total_score: int = 0
    ratio: AutomationRatio = Field(default_factory=AutomationRatio)
    tasks: List[Task] = Field(default_factory=list)
    summary: str = ""
    recommendations: List[str] = Field(default_factory=list)
    original_text: Optional[str] = None

    @property
    def task_count(self) -> int:
        """Get the number of analysed tasks."""
        return len(self.tasks)
