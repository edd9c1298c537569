"""Shared pydantic models — the contract between the gateway, the planner and main.py."""

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class TeamSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    key: str  # short uppercase prefix, e.g. ENG
    description: str | None = None


class ProjectSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    team_id: str
    description: str | None = None
    icon: str | None = None
    color: str | None = None


class IssueSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str | None = None
    team_id: str
    project_id: str | None = None
    priority: int | None = None  # lower = more urgent
    assignee_id: str | None = None
    due_date: str | None = None  # YYYY-MM-DD
    labels: list[str] = []  # label names, resolved to ids by the gateway


class IssueUpdate(BaseModel):
    """Partial IssueSpec. Only fields that were explicitly set are sent."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    description: str | None = None
    team_id: str | None = None
    project_id: str | None = None
    priority: int | None = None
    assignee_id: str | None = None
    due_date: str | None = None
    labels: list[str] | None = None


class IssueFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    team_id: str
    project_id: str | None = None

    def to_graphql(self) -> dict:
        """Render as a Linear IssueFilter; the project clause only when set."""
        clauses: dict = {"team": {"id": {"eq": self.team_id}}}
        if self.project_id:
            clauses["project"] = {"id": {"eq": self.project_id}}
        return clauses


# ---------------------------------------------------------------------------
# Entities returned by the gateway
# ---------------------------------------------------------------------------


class Team(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    key: str
    description: str | None = None


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str | None = None
    url: str | None = None


class Issue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    identifier: str  # ENG-123
    title: str
    description: str | None = None
    url: str | None = None
    priority: int | None = None
    state: str | None = None
    assignee: str | None = None
    project_id: str | None = None
    due_date: str | None = None
    labels: list[str] = []


# ---------------------------------------------------------------------------
# Planning
# ---------------------------------------------------------------------------


class PlanParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_name: str
    project_scope: str
    industry: str | None = None
    timeline: str | None = None
    technical_requirements: list[str] = []
    target_audience: str | None = None


class IssueTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    priority: int = Field(ge=1, le=3)
    estimated_hours: int | None = None
    labels: tuple[str, ...] = ()


class Milestone(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    issues: tuple[IssueTemplate, ...]


class Plan(BaseModel):
    model_config = ConfigDict(frozen=True)

    project_description: str
    milestones: tuple[Milestone, ...] = Field(min_length=1)

    @property
    def issue_count(self) -> int:
        """Template issues across all milestones (markers not included)."""
        return sum(len(m.issues) for m in self.milestones)


class CreatedMilestone(BaseModel):
    """A milestone marker issue and the child issues created under it."""

    model_config = ConfigDict(frozen=True)

    milestone: Issue
    issues: list[Issue] = []


class ProjectWithPlan(BaseModel):
    """Returned by create_project_with_plan."""

    model_config = ConfigDict(frozen=True)

    project: Project
    milestones: list[CreatedMilestone] = []
