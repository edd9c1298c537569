"""linplan CLI — all commands."""

import asyncio
import logging
from collections.abc import Coroutine
from pathlib import Path
from typing import Annotated, Any, TypeVar

import httpx
import tomlkit
import typer
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from linplan.client import LinearPlanner
from linplan.errors import LinplanError
from linplan.models import IssueSpec, IssueUpdate, Plan, PlanParams, ProjectSpec, TeamSpec
from linplan.planner import generate_plan, select_template
from linplan.settings import CONFIG_PATH, _list_profiles, get_settings

app = typer.Typer(help="linplan: Linear teams, projects, issues and templated project plans", no_args_is_help=True)

T = TypeVar("T")

ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-P", help="Profile name from ~/.config/linplan/config.toml"),
]
TeamOpt = Annotated[
    str | None,
    typer.Option("--team", "-t", help="Team ID (defaults to team_id from the active profile)"),
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log Linear requests")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Client factory
# ---------------------------------------------------------------------------


def get_client(profile: str | None = None) -> LinearPlanner:
    return LinearPlanner(get_settings(profile=profile))


def _resolve_team(team: str | None, profile: str | None) -> str:
    team_id = team or get_settings(profile=profile).team_id
    if not team_id:
        rprint(
            "[red]No team specified. Use --team or set team_id in your config profile. "
            "Run 'linplan list-teams' to see available teams.[/red]"
        )
        raise typer.Exit(1)
    return team_id


def _run(call: Coroutine[Any, Any, T]) -> T:
    """Drive one client coroutine; API failures end the command with exit code 1."""
    try:
        return asyncio.run(call)
    except (LinplanError, httpx.HTTPError) as exc:
        rprint(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc


# ---------------------------------------------------------------------------
# Plan rendering
# ---------------------------------------------------------------------------

_PRIORITY_LABEL = {0: "— (No priority)", 1: "🔴 Urgent", 2: "🟠 High", 3: "🟡 Medium", 4: "🟢 Low"}


def render_plan(plan: Plan, params: PlanParams) -> str:
    """Render a generated plan as a markdown document."""
    lines = [f"# {params.project_name}", "", plan.project_description, ""]
    if params.timeline:
        lines += [f"**Timeline:** {params.timeline}", ""]

    for number, milestone in enumerate(plan.milestones, start=1):
        lines += [f"## {number}. {milestone.title}", "", milestone.description, ""]
        for issue in milestone.issues:
            pri = _PRIORITY_LABEL.get(issue.priority, str(issue.priority))
            extras = [pri]
            if issue.estimated_hours:
                extras.append(f"{issue.estimated_hours}h")
            if issue.labels:
                extras.append(", ".join(issue.labels))
            lines.append(f"- **{issue.title}** ({' · '.join(extras)}): {issue.description}")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def _plan_params(
    name: str,
    scope: str,
    industry: str | None,
    timeline: str | None,
    tech: list[str] | None,
    audience: str | None,
) -> PlanParams:
    return PlanParams(
        project_name=name,
        project_scope=scope,
        industry=industry,
        timeline=timeline,
        technical_requirements=tech or [],
        target_audience=audience,
    )


NameArg = Annotated[str, typer.Argument(help="Project name")]
ScopeArg = Annotated[str, typer.Argument(help="What the project covers")]
IndustryOpt = Annotated[
    str | None, typer.Option("--industry", "-i", help="software, marketing, design or anything else")
]
TimelineOpt = Annotated[str | None, typer.Option("--timeline", help="Free-text timeline")]
TechOpt = Annotated[list[str] | None, typer.Option("--tech", help="Technical requirement (repeatable)")]
AudienceOpt = Annotated[str | None, typer.Option("--audience", help="Target audience")]


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("list-teams")
def list_teams(profile: ProfileOpt = None) -> None:
    """List teams in the workspace."""
    teams = _run(get_client(profile).get_teams())

    table = Table(title="Teams")
    table.add_column("Key", style="cyan")
    table.add_column("Name")
    table.add_column("ID", style="dim")

    for t in teams:
        table.add_row(t.key, t.name, t.id)

    rprint(table)


@app.command("create-team")
def create_team(
    name: Annotated[str, typer.Argument(help="Team name")],
    key: Annotated[str, typer.Argument(help="Team key, e.g. ENG")],
    description: Annotated[str | None, typer.Option("--description", "-d")] = None,
    profile: ProfileOpt = None,
) -> None:
    """Create a team."""
    team = _run(get_client(profile).create_team(TeamSpec(name=name, key=key, description=description)))
    rprint(f"[green]✓[/green] [bold]{team.key}[/bold] {team.name}")
    rprint(f"  {team.id}")


@app.command("list-projects")
def list_projects(team: TeamOpt = None, profile: ProfileOpt = None) -> None:
    """List projects for a team."""
    team_id = _resolve_team(team, profile)
    projects = _run(get_client(profile).get_projects(team_id))

    table = Table(title="Projects")
    table.add_column("Name", style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("URL", style="dim")

    for p in projects:
        table.add_row(p.name, p.id, p.url or "")

    rprint(table)


@app.command("create-project")
def create_project(
    name: Annotated[str, typer.Argument(help="Project name")],
    description: Annotated[str | None, typer.Option("--description", "-d")] = None,
    icon: Annotated[str | None, typer.Option("--icon")] = None,
    color: Annotated[str | None, typer.Option("--color", help="Hex color, e.g. #5E6AD2")] = None,
    team: TeamOpt = None,
    profile: ProfileOpt = None,
) -> None:
    """Create a project under a team."""
    team_id = _resolve_team(team, profile)
    spec = ProjectSpec(name=name, team_id=team_id, description=description, icon=icon, color=color)
    project = _run(get_client(profile).create_project(spec))
    rprint(f"[green]✓[/green] [bold]{project.name}[/bold] {project.id}")
    if project.url:
        rprint(f"  {project.url}")


@app.command("list-issues")
def list_issues(
    project: Annotated[str | None, typer.Option("--project", help="Only issues in this project")] = None,
    team: TeamOpt = None,
    profile: ProfileOpt = None,
) -> None:
    """List issues for a team, optionally narrowed to one project."""
    team_id = _resolve_team(team, profile)
    issues = _run(get_client(profile).get_issues(team_id, project))

    table = Table(title="Issues")
    table.add_column("ID", style="cyan")
    table.add_column("State")
    table.add_column("Pri")
    table.add_column("Title")
    table.add_column("Labels", style="dim")

    for issue in issues:
        pri = _PRIORITY_LABEL.get(issue.priority, "—") if issue.priority is not None else "—"
        table.add_row(issue.identifier, issue.state or "—", pri, issue.title, ", ".join(issue.labels))

    rprint(table)


@app.command("create-issue")
def create_issue(
    title: Annotated[str, typer.Argument(help="Issue title")],
    description: Annotated[str | None, typer.Argument(help="Issue description")] = None,
    project: Annotated[str | None, typer.Option("--project", help="Project ID")] = None,
    priority: Annotated[
        int,
        typer.Option("--priority", "-p", min=0, max=4, help="Priority 0-4 (1 = urgent)"),
    ] = 3,
    assignee: Annotated[str | None, typer.Option("--assignee", help="Assignee user ID")] = None,
    due: Annotated[str | None, typer.Option("--due", help="Due date, YYYY-MM-DD")] = None,
    label: Annotated[list[str] | None, typer.Option("--label", "-l", help="Label name (repeatable)")] = None,
    team: TeamOpt = None,
    profile: ProfileOpt = None,
) -> None:
    """Create a new issue."""
    team_id = _resolve_team(team, profile)
    spec = IssueSpec(
        title=title,
        description=description,
        team_id=team_id,
        project_id=project,
        priority=priority,
        assignee_id=assignee,
        due_date=due,
        labels=label or [],
    )
    created = _run(get_client(profile).create_issue(spec))
    rprint(f"[green]✓[/green] [bold]{created.identifier}[/bold] {created.title}")
    if created.url:
        rprint(f"  {created.url}")


@app.command("update-issue")
def update_issue(
    issue_id: Annotated[str, typer.Argument(help="Issue ID or identifier (e.g. ENG-123)")],
    title: Annotated[str | None, typer.Option("--title")] = None,
    description: Annotated[str | None, typer.Option("--description", "-d")] = None,
    priority: Annotated[int | None, typer.Option("--priority", "-p", min=0, max=4)] = None,
    assignee: Annotated[str | None, typer.Option("--assignee", help="Assignee user ID")] = None,
    due: Annotated[str | None, typer.Option("--due", help="Due date, YYYY-MM-DD")] = None,
    label: Annotated[list[str] | None, typer.Option("--label", "-l", help="Replace labels (repeatable)")] = None,
    profile: ProfileOpt = None,
) -> None:
    """Update fields on an existing issue. Only the options given are changed."""
    changes = {
        "title": title,
        "description": description,
        "priority": priority,
        "assignee_id": assignee,
        "due_date": due,
        "labels": label,
    }
    updates = IssueUpdate(**{k: v for k, v in changes.items() if v is not None})
    if not updates.model_fields_set:
        rprint("[yellow]Nothing to update.[/yellow]")
        raise typer.Exit(1)

    updated = _run(get_client(profile).update_issue(issue_id, updates))
    rprint(f"[green]✓[/green] Updated [bold]{updated.identifier}[/bold] {updated.title}")


@app.command("delete-issue")
def delete_issue(
    issue_id: Annotated[str, typer.Argument(help="Issue ID or identifier (e.g. ENG-123)")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    profile: ProfileOpt = None,
) -> None:
    """Delete an issue."""
    if not yes:
        typer.confirm(f"Delete {issue_id}?", abort=True)
    if _run(get_client(profile).delete_issue(issue_id)):
        rprint(f"[green]✓[/green] Deleted {issue_id}")
    else:
        rprint(f"[red]Linear did not delete {issue_id}[/red]")
        raise typer.Exit(1)


@app.command("plan")
def plan_cmd(
    name: NameArg,
    scope: ScopeArg,
    industry: IndustryOpt = None,
    timeline: TimelineOpt = None,
    tech: TechOpt = None,
    audience: AudienceOpt = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write markdown to file instead of stdout"),
    ] = None,
) -> None:
    """Preview the plan for a project without touching Linear."""
    params = _plan_params(name, scope, industry, timeline, tech, audience)
    plan = generate_plan(params)
    rendered = render_plan(plan, params)

    if output:
        output.write_text(rendered)
        rprint(f"[green]✓[/green] Wrote {select_template(industry).name} plan to {escape(str(output))}")
    else:
        rprint(escape(rendered))


@app.command("create-plan")
def create_plan(
    name: NameArg,
    scope: ScopeArg,
    industry: IndustryOpt = None,
    timeline: TimelineOpt = None,
    tech: TechOpt = None,
    audience: AudienceOpt = None,
    team: TeamOpt = None,
    profile: ProfileOpt = None,
) -> None:
    """Create a project in Linear with milestone and task issues from a plan."""
    team_id = _resolve_team(team, profile)
    params = _plan_params(name, scope, industry, timeline, tech, audience)
    result = _run(get_client(profile).create_project_with_plan(team_id, params))

    table = Table(title=escape(result.project.name))
    table.add_column("Milestone", style="bold")
    table.add_column("Issue", style="cyan")
    table.add_column("Title")

    for created in result.milestones:
        table.add_row(escape(created.milestone.title), created.milestone.identifier, "")
        for issue in created.issues:
            table.add_row("", issue.identifier, escape(issue.title))

    rprint(table)
    total = sum(1 + len(m.issues) for m in result.milestones)
    rprint(f"[green]✓[/green] Created project {result.project.id} with {total} issues")


@app.command("set-default")
def set_default(
    profile: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default profile in ~/.config/linplan/config.toml."""
    if not CONFIG_PATH.exists():
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        doc = tomlkit.document()
        doc.add("default_profile", profile)
        CONFIG_PATH.write_text(tomlkit.dumps(doc))
        rprint(f'[green]✓[/green] Default profile set to "{profile}" in {CONFIG_PATH}')
        return

    doc = tomlkit.load(CONFIG_PATH.open())
    profiles = _list_profiles(doc)
    if profile not in profiles:
        rprint(f"[red]Profile '{profile}' not found in {CONFIG_PATH}. Available: {profiles or '(none)'}[/red]")
        raise typer.Exit(1)

    doc["default_profile"] = profile
    CONFIG_PATH.write_text(tomlkit.dumps(doc))
    rprint(f'[green]✓[/green] Default profile set to "{profile}" in {CONFIG_PATH}')


@app.command("config-show")
def config_show(profile: ProfileOpt = None) -> None:
    """Show resolved configuration (masks the API key)."""
    settings = get_settings(profile=profile)
    api_key = settings.api_key.get_secret_value() if settings.api_key else ""

    table = Table(title="linplan Configuration")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("default_profile", settings.default_profile or "[dim](not set)[/dim]")
    table.add_row("api_key", "***" if len(api_key) <= 5 else f"lin_api_...{api_key[-5:]}")
    table.add_row("team_id", settings.team_id or "[dim](not set)[/dim]")

    rprint(table)
