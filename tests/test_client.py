"""Tests for the LinearPlanner facade."""

from unittest.mock import AsyncMock

import pytest

from linplan.client import LinearPlanner
from linplan.models import IssueSpec, IssueUpdate, PlanParams, ProjectSpec, TeamSpec
from linplan.planner import generate_plan
from linplan.providers.linear import LinearGateway
from linplan.settings import LinplanSettings


def _settings() -> LinplanSettings:
    return LinplanSettings(api_key="lin_api_test")  # type: ignore[arg-type]


def test_builds_linear_gateway_by_default() -> None:
    client = LinearPlanner(_settings())
    assert isinstance(client.gateway, LinearGateway)


def test_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LINPLAN_API_KEY", raising=False)
    with pytest.raises(ValueError, match="api_key"):
        LinearPlanner(LinplanSettings(_env_file=None))  # type: ignore[call-arg]


@pytest.mark.asyncio
async def test_delegates_crud(fake_gateway: AsyncMock) -> None:
    client = LinearPlanner(_settings(), gateway=fake_gateway)
    fake_gateway.delete_issue.return_value = True

    await client.create_team(TeamSpec(name="Eng", key="ENG"))
    await client.create_project(ProjectSpec(name="P", team_id="t1"))
    await client.create_issue(IssueSpec(title="I", team_id="t1"))
    await client.get_teams()
    await client.get_projects("t1")
    await client.get_issues("t1", "p1")
    await client.update_issue("ENG-1", IssueUpdate(title="x"))
    assert await client.delete_issue("ENG-1") is True

    fake_gateway.create_team.assert_awaited_once()
    fake_gateway.create_project.assert_awaited_once()
    fake_gateway.create_issue.assert_awaited_once()
    fake_gateway.get_teams.assert_awaited_once()
    fake_gateway.get_projects.assert_awaited_once_with("t1")
    fake_gateway.get_issues.assert_awaited_once_with("t1", "p1")
    fake_gateway.update_issue.assert_awaited_once_with("ENG-1", IssueUpdate(title="x"))
    fake_gateway.delete_issue.assert_awaited_once_with("ENG-1")


@pytest.mark.asyncio
async def test_generate_project_plan(plan_params: PlanParams) -> None:
    client = LinearPlanner(_settings())
    assert await client.generate_project_plan(plan_params) == generate_plan(plan_params)


@pytest.mark.asyncio
async def test_create_project_with_plan_uses_gateway(fake_gateway: AsyncMock, plan_params: PlanParams) -> None:
    client = LinearPlanner(_settings(), gateway=fake_gateway)

    result = await client.create_project_with_plan("team_xyz", plan_params)

    assert result.project.id == "proj_123"
    fake_gateway.create_project.assert_awaited_once()
