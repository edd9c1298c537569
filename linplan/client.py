"""LinearPlanner — the library entry point for embedding applications."""

import logging

from linplan import planner
from linplan.models import (
    Issue,
    IssueSpec,
    IssueUpdate,
    Plan,
    PlanParams,
    Project,
    ProjectSpec,
    ProjectWithPlan,
    Team,
    TeamSpec,
)
from linplan.providers.base import ProjectGateway
from linplan.providers.linear import LinearGateway
from linplan.settings import LinplanSettings

logger = logging.getLogger(__name__)


class LinearPlanner:
    """Linear CRUD plus template-driven project plans.

    Usage:
        client = LinearPlanner(LinplanSettings(api_key="lin_api_..."))
        plan = await client.generate_project_plan(PlanParams(project_name="Acme", project_scope="billing"))
    """

    def __init__(self, settings: LinplanSettings, gateway: ProjectGateway | None = None) -> None:
        self.gateway = gateway or LinearGateway(settings)

    async def create_team(self, spec: TeamSpec) -> Team:
        return await self.gateway.create_team(spec)

    async def create_project(self, spec: ProjectSpec) -> Project:
        return await self.gateway.create_project(spec)

    async def create_issue(self, spec: IssueSpec) -> Issue:
        return await self.gateway.create_issue(spec)

    async def get_teams(self) -> list[Team]:
        return await self.gateway.get_teams()

    async def get_projects(self, team_id: str) -> list[Project]:
        return await self.gateway.get_projects(team_id)

    async def get_issues(self, team_id: str, project_id: str | None = None) -> list[Issue]:
        return await self.gateway.get_issues(team_id, project_id)

    async def update_issue(self, issue_id: str, updates: IssueUpdate) -> Issue:
        return await self.gateway.update_issue(issue_id, updates)

    async def delete_issue(self, issue_id: str) -> bool:
        return await self.gateway.delete_issue(issue_id)

    async def generate_project_plan(self, params: PlanParams) -> Plan:
        try:
            return planner.generate_plan(params)
        except Exception:
            logger.error("Error generating project plan", exc_info=True)
            raise

    async def create_project_with_plan(self, team_id: str, params: PlanParams) -> ProjectWithPlan:
        return await planner.create_project_with_plan(self.gateway, team_id, params)
