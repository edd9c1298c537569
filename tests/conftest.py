"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest

from linplan.models import Issue, PlanParams, Project, Team
from linplan.providers.base import ProjectGateway


@pytest.fixture
def sample_team() -> Team:
    return Team(id="team_xyz", name="Engineering", key="ENG")


@pytest.fixture
def sample_project() -> Project:
    return Project(
        id="proj_123",
        name="Acme Portal",
        description="Portal rebuild",
        url="https://linear.app/acme/project/acme-portal",
    )


@pytest.fixture
def sample_issue() -> Issue:
    return Issue(
        id="issue_abc123",
        identifier="ENG-123",
        title="Fix null check in auth middleware",
        description="The middleware throws when session is None.",
        url="https://linear.app/acme/issue/ENG-123",
        priority=2,
        state="In Progress",
        assignee="Jane Doe",
        project_id="proj_123",
        labels=["bug", "auth"],
    )


@pytest.fixture
def plan_params() -> PlanParams:
    return PlanParams(
        project_name="Acme Portal",
        project_scope="internal tooling",
        industry="software",
    )


@pytest.fixture
def fake_gateway(sample_project: Project) -> AsyncMock:
    """Gateway double: create_project returns sample_project, create_issue echoes the spec."""
    gateway = AsyncMock(spec=ProjectGateway)
    gateway.create_project.return_value = sample_project

    counter = iter(range(1, 1000))

    async def _create_issue(spec):
        n = next(counter)
        return Issue(
            id=f"issue_{n}",
            identifier=f"ENG-{n}",
            title=spec.title,
            description=spec.description,
            priority=spec.priority,
            project_id=spec.project_id,
            labels=spec.labels,
        )

    gateway.create_issue.side_effect = _create_issue
    return gateway
