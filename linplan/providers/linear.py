"""Linear GraphQL API gateway."""

import logging

import httpx

from linplan.errors import GatewayError, NotFoundError
from linplan.models import (
    Issue,
    IssueFilter,
    IssueSpec,
    IssueUpdate,
    Project,
    ProjectSpec,
    Team,
    TeamSpec,
)
from linplan.providers.base import ProjectGateway
from linplan.settings import LinplanSettings

logger = logging.getLogger(__name__)

ENDPOINT = "https://api.linear.app/graphql"

_TEAM_FIELDS = "id name key description"
_PROJECT_FIELDS = "id name description url"
_ISSUE_FIELDS = """
    id
    identifier
    title
    description
    url
    priority
    dueDate
    state { name }
    assignee { name }
    project { id }
    team { id }
    labels { nodes { name } }
"""

_CREATE_TEAM = f"""
mutation CreateTeam($input: TeamCreateInput!) {{
  teamCreate(input: $input) {{
    success
    team {{ {_TEAM_FIELDS} }}
  }}
}}
"""

_CREATE_PROJECT = f"""
mutation CreateProject($input: ProjectCreateInput!) {{
  projectCreate(input: $input) {{
    success
    project {{ {_PROJECT_FIELDS} }}
  }}
}}
"""

_CREATE_ISSUE = f"""
mutation CreateIssue($input: IssueCreateInput!) {{
  issueCreate(input: $input) {{
    success
    issue {{ {_ISSUE_FIELDS} }}
  }}
}}
"""

_UPDATE_ISSUE = f"""
mutation UpdateIssue($id: String!, $input: IssueUpdateInput!) {{
  issueUpdate(id: $id, input: $input) {{
    success
    issue {{ {_ISSUE_FIELDS} }}
  }}
}}
"""

_DELETE_ISSUE = """
mutation DeleteIssue($id: String!) {
  issueDelete(id: $id) {
    success
  }
}
"""

_GET_ISSUE = f"""
query GetIssue($id: String!) {{
  issue(id: $id) {{ {_ISSUE_FIELDS} }}
}}
"""

_LIST_TEAMS = f"""
query ListTeams {{
  teams {{
    nodes {{ {_TEAM_FIELDS} }}
  }}
}}
"""

_GET_TEAM = f"""
query GetTeam($id: String!) {{
  team(id: $id) {{ {_TEAM_FIELDS} }}
}}
"""

_TEAM_PROJECTS = f"""
query TeamProjects($id: String!) {{
  team(id: $id) {{
    projects {{
      nodes {{ {_PROJECT_FIELDS} }}
    }}
  }}
}}
"""

_LIST_ISSUES = f"""
query ListIssues($filter: IssueFilter) {{
  issues(filter: $filter) {{
    nodes {{ {_ISSUE_FIELDS} }}
  }}
}}
"""

_FIND_LABELS = """
query FindLabels($names: [String!]) {
  issueLabels(filter: { name: { in: $names } }) {
    nodes {
      id
      name
      team { id }
    }
  }
}
"""

_CREATE_LABEL = """
mutation CreateLabel($input: IssueLabelCreateInput!) {
  issueLabelCreate(input: $input) {
    success
    issueLabel { id name }
  }
}
"""

# snake_case model field -> Linear input field
_ISSUE_INPUT_FIELDS = {
    "title": "title",
    "description": "description",
    "team_id": "teamId",
    "project_id": "projectId",
    "priority": "priority",
    "assignee_id": "assigneeId",
    "due_date": "dueDate",
}


class LinearGateway(ProjectGateway):
    def __init__(self, settings: LinplanSettings) -> None:
        if not settings.api_key:
            raise ValueError("api_key is required")
        self._api_key = settings.api_key.get_secret_value()

    async def _gql(self, query: str, variables: dict | None = None) -> dict:
        logger.debug("Linear request: %s", query.split("{", 1)[0].split("(", 1)[0].strip())
        async with httpx.AsyncClient(timeout=30) as client:
            response = await client.post(
                ENDPOINT,
                json={"query": query, "variables": variables or {}},
                headers={
                    "Authorization": self._api_key,
                    "Content-Type": "application/json",
                },
            )
        response.raise_for_status()
        data = response.json()
        if "errors" in data:
            messages = [e.get("message", "") for e in data["errors"]]
            if any(m.startswith("Entity not found") for m in messages):
                raise NotFoundError(f"Linear API error: {data['errors']}")
            raise GatewayError(f"Linear API error: {data['errors']}")
        return data["data"]

    @staticmethod
    def _payload(data: dict, mutation: str) -> dict:
        result = data[mutation]
        if not result or not result["success"]:
            raise GatewayError(f"Linear {mutation} returned success=false")
        return result

    def _issue_from_node(self, node: dict) -> Issue:
        return Issue(
            id=node["id"],
            identifier=node["identifier"],
            title=node["title"],
            description=node.get("description"),
            url=node.get("url"),
            priority=node.get("priority"),
            state=node["state"]["name"] if node.get("state") else None,
            assignee=node["assignee"]["name"] if node.get("assignee") else None,
            project_id=node["project"]["id"] if node.get("project") else None,
            due_date=node.get("dueDate"),
            labels=[label["name"] for label in (node.get("labels") or {}).get("nodes", [])],
        )

    async def _fetch_issue(self, issue_id: str) -> dict:
        data = await self._gql(_GET_ISSUE, {"id": issue_id})
        node = data["issue"]
        if not node:
            raise NotFoundError(f"Issue '{issue_id}' not found in Linear")
        return node

    async def _resolve_label_ids(self, team_id: str, names: list[str]) -> list[str]:
        """Map label names to ids, creating team labels for names that don't exist yet."""
        data = await self._gql(_FIND_LABELS, {"names": names})
        found: dict[str, str] = {}
        for node in data["issueLabels"]["nodes"]:
            # workspace labels have no team and apply everywhere
            if node.get("team") is None or node["team"]["id"] == team_id:
                found.setdefault(node["name"], node["id"])

        ids = []
        for name in dict.fromkeys(names):
            if name not in found:
                created = await self._gql(_CREATE_LABEL, {"input": {"name": name, "teamId": team_id}})
                found[name] = self._payload(created, "issueLabelCreate")["issueLabel"]["id"]
                logger.info("Created label '%s' on team %s", name, team_id)
            ids.append(found[name])
        return ids

    async def create_team(self, spec: TeamSpec) -> Team:
        try:
            data = await self._gql(_CREATE_TEAM, {"input": spec.model_dump(exclude_none=True)})
            return Team(**self._payload(data, "teamCreate")["team"])
        except Exception:
            logger.error("Error creating team", exc_info=True)
            raise

    async def create_project(self, spec: ProjectSpec) -> Project:
        project_input = {
            "name": spec.name,
            "teamIds": [spec.team_id],
            "description": spec.description,
            "icon": spec.icon,
            "color": spec.color,
        }
        try:
            data = await self._gql(
                _CREATE_PROJECT,
                {"input": {k: v for k, v in project_input.items() if v is not None}},
            )
            return Project(**self._payload(data, "projectCreate")["project"])
        except Exception:
            logger.error("Error creating project", exc_info=True)
            raise

    async def create_issue(self, spec: IssueSpec) -> Issue:
        fields = spec.model_dump(exclude={"labels"}, exclude_none=True)
        issue_input = {_ISSUE_INPUT_FIELDS[k]: v for k, v in fields.items()}
        try:
            if spec.labels:
                issue_input["labelIds"] = await self._resolve_label_ids(spec.team_id, spec.labels)
            data = await self._gql(_CREATE_ISSUE, {"input": issue_input})
            return self._issue_from_node(self._payload(data, "issueCreate")["issue"])
        except Exception:
            logger.error("Error creating issue", exc_info=True)
            raise

    async def get_teams(self) -> list[Team]:
        try:
            data = await self._gql(_LIST_TEAMS)
            return [Team(**n) for n in data["teams"]["nodes"]]
        except Exception:
            logger.error("Error fetching teams", exc_info=True)
            raise

    async def get_projects(self, team_id: str) -> list[Project]:
        try:
            team = (await self._gql(_GET_TEAM, {"id": team_id}))["team"]
            if not team:
                raise NotFoundError(f"Team '{team_id}' not found in Linear")
            data = await self._gql(_TEAM_PROJECTS, {"id": team["id"]})
            return [Project(**n) for n in data["team"]["projects"]["nodes"]]
        except Exception:
            logger.error("Error fetching projects", exc_info=True)
            raise

    async def get_issues(self, team_id: str, project_id: str | None = None) -> list[Issue]:
        issue_filter = IssueFilter(team_id=team_id, project_id=project_id)
        try:
            data = await self._gql(_LIST_ISSUES, {"filter": issue_filter.to_graphql()})
            return [self._issue_from_node(n) for n in data["issues"]["nodes"]]
        except Exception:
            logger.error("Error fetching issues", exc_info=True)
            raise

    async def update_issue(self, issue_id: str, updates: IssueUpdate) -> Issue:
        fields = updates.model_dump(exclude_unset=True, exclude={"labels"})
        issue_input = {_ISSUE_INPUT_FIELDS[k]: v for k, v in fields.items()}
        try:
            node = await self._fetch_issue(issue_id)
            if updates.labels is not None:
                team_id = updates.team_id or node["team"]["id"]
                issue_input["labelIds"] = (
                    await self._resolve_label_ids(team_id, updates.labels) if updates.labels else []
                )
            data = await self._gql(_UPDATE_ISSUE, {"id": node["id"], "input": issue_input})
            return self._issue_from_node(self._payload(data, "issueUpdate")["issue"])
        except Exception:
            logger.error("Error updating issue", exc_info=True)
            raise

    async def delete_issue(self, issue_id: str) -> bool:
        try:
            node = await self._fetch_issue(issue_id)
            data = await self._gql(_DELETE_ISSUE, {"id": node["id"]})
            return bool(data["issueDelete"]["success"])
        except Exception:
            logger.error("Error deleting issue", exc_info=True)
            raise
