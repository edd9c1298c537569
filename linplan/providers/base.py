"""Abstract base class for project-management gateways."""

from abc import ABC, abstractmethod

from linplan.models import Issue, IssueSpec, IssueUpdate, Project, ProjectSpec, Team, TeamSpec


class ProjectGateway(ABC):
    @abstractmethod
    async def create_team(self, spec: TeamSpec) -> Team: ...

    @abstractmethod
    async def create_project(self, spec: ProjectSpec) -> Project: ...

    @abstractmethod
    async def create_issue(self, spec: IssueSpec) -> Issue: ...

    @abstractmethod
    async def get_teams(self) -> list[Team]: ...

    @abstractmethod
    async def get_projects(self, team_id: str) -> list[Project]: ...

    @abstractmethod
    async def get_issues(self, team_id: str, project_id: str | None = None) -> list[Issue]: ...

    @abstractmethod
    async def update_issue(self, issue_id: str, updates: IssueUpdate) -> Issue: ...

    @abstractmethod
    async def delete_issue(self, issue_id: str) -> bool: ...
