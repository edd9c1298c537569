"""Smoke tests for all CLI commands using typer CliRunner."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import tomlkit
from typer.testing import CliRunner

import linplan.settings as settings_module
from linplan.errors import NotFoundError
from linplan.main import app, render_plan
from linplan.models import CreatedMilestone, Issue, IssueUpdate, PlanParams, Project, ProjectWithPlan, Team
from linplan.planner import generate_plan

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_lru_cache():
    settings_module._load_toml.cache_clear()
    yield
    settings_module._load_toml.cache_clear()


def _issue(n: int, title: str = "Test issue") -> Issue:
    return Issue(
        id=f"issue_{n}",
        identifier=f"ENG-{n}",
        title=title,
        url=f"https://linear.app/acme/issue/ENG-{n}",
        priority=3,
        state="Todo",
        labels=["bug"],
    )


def _mock_client() -> MagicMock:
    client = MagicMock()
    project = Project(id="proj_1", name="Acme Portal", url="https://linear.app/acme/project/acme-portal")
    client.get_teams = AsyncMock(return_value=[Team(id="t1", name="Eng", key="ENG")])
    client.create_team = AsyncMock(return_value=Team(id="t2", name="Design", key="DES"))
    client.get_projects = AsyncMock(return_value=[project])
    client.create_project = AsyncMock(return_value=project)
    client.get_issues = AsyncMock(return_value=[_issue(1)])
    client.create_issue = AsyncMock(return_value=_issue(99, "New"))
    client.update_issue = AsyncMock(return_value=_issue(1, "Renamed"))
    client.delete_issue = AsyncMock(return_value=True)
    client.create_project_with_plan = AsyncMock(
        return_value=ProjectWithPlan(
            project=project,
            milestones=[CreatedMilestone(milestone=_issue(10, "Milestone: Kickoff"), issues=[_issue(11, "Task")])],
        )
    )
    return client


class TestListTeams:
    def test_renders_table(self) -> None:
        with patch("linplan.main.get_client", return_value=_mock_client()):
            result = runner.invoke(app, ["list-teams"])
        assert result.exit_code == 0
        assert "ENG" in result.output


class TestCreateTeam:
    def test_creates(self) -> None:
        client = _mock_client()
        with patch("linplan.main.get_client", return_value=client):
            result = runner.invoke(app, ["create-team", "Design", "DES"])
        assert result.exit_code == 0
        assert "DES" in result.output
        assert client.create_team.await_args.args[0].key == "DES"


class TestListProjects:
    def test_renders_table(self) -> None:
        with patch("linplan.main.get_client", return_value=_mock_client()):
            result = runner.invoke(app, ["list-projects", "--team", "t1"])
        assert result.exit_code == 0
        assert "Acme Portal" in result.output

    def test_no_team_exits(self) -> None:
        with patch("linplan.main.get_client", return_value=_mock_client()):
            with patch("linplan.main.get_settings") as mock_settings:
                mock_settings.return_value = MagicMock(team_id=None)
                result = runner.invoke(app, ["list-projects"])
        assert result.exit_code != 0


class TestCreateProject:
    def test_uses_profile_team(self) -> None:
        client = _mock_client()
        with patch("linplan.main.get_client", return_value=client):
            with patch("linplan.main.get_settings") as mock_settings:
                mock_settings.return_value = MagicMock(team_id="t1")
                result = runner.invoke(app, ["create-project", "Acme Portal", "-d", "Portal rebuild"])
        assert result.exit_code == 0
        spec = client.create_project.await_args.args[0]
        assert spec.team_id == "t1"
        assert spec.description == "Portal rebuild"


class TestListIssues:
    def test_passes_project_filter(self) -> None:
        client = _mock_client()
        with patch("linplan.main.get_client", return_value=client):
            result = runner.invoke(app, ["list-issues", "--team", "t1", "--project", "proj_1"])
        assert result.exit_code == 0
        assert "ENG-1" in result.output
        client.get_issues.assert_awaited_once_with("t1", "proj_1")


class TestCreateIssue:
    def test_creates_with_labels(self) -> None:
        client = _mock_client()
        with patch("linplan.main.get_client", return_value=client):
            result = runner.invoke(
                app, ["create-issue", "New", "Desc", "--team", "t1", "-p", "1", "-l", "bug", "-l", "ui"]
            )
        assert result.exit_code == 0
        assert "ENG-99" in result.output
        spec = client.create_issue.await_args.args[0]
        assert spec.priority == 1
        assert spec.labels == ["bug", "ui"]

    def test_gateway_error_exits_cleanly(self) -> None:
        client = _mock_client()
        client.create_issue.side_effect = NotFoundError("Team 'nope' not found in Linear")
        with patch("linplan.main.get_client", return_value=client):
            result = runner.invoke(app, ["create-issue", "New", "--team", "nope"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestUpdateIssue:
    def test_sends_only_given_fields(self) -> None:
        client = _mock_client()
        with patch("linplan.main.get_client", return_value=client):
            result = runner.invoke(app, ["update-issue", "ENG-1", "--title", "Renamed"])
        assert result.exit_code == 0
        client.update_issue.assert_awaited_once_with("ENG-1", IssueUpdate(title="Renamed"))

    def test_nothing_to_update_exits(self) -> None:
        client = _mock_client()
        with patch("linplan.main.get_client", return_value=client):
            result = runner.invoke(app, ["update-issue", "ENG-1"])
        assert result.exit_code != 0
        client.update_issue.assert_not_awaited()


class TestDeleteIssue:
    def test_deletes_with_yes(self) -> None:
        client = _mock_client()
        with patch("linplan.main.get_client", return_value=client):
            result = runner.invoke(app, ["delete-issue", "ENG-1", "--yes"])
        assert result.exit_code == 0
        assert "Deleted ENG-1" in result.output

    def test_declined_confirmation_aborts(self) -> None:
        client = _mock_client()
        with patch("linplan.main.get_client", return_value=client):
            result = runner.invoke(app, ["delete-issue", "ENG-1"], input="n\n")
        assert result.exit_code != 0
        client.delete_issue.assert_not_awaited()


class TestPlan:
    def test_prints_markdown(self) -> None:
        result = runner.invoke(app, ["plan", "Acme Portal", "internal tooling"])
        assert result.exit_code == 0
        assert "Requirements & Planning" in result.output

    def test_writes_to_file(self, tmp_path: Path) -> None:
        out = tmp_path / "PLAN.md"
        result = runner.invoke(
            app, ["plan", "Spring Launch", "new product line", "-i", "Digital Marketing", "-o", str(out)]
        )
        assert result.exit_code == 0
        assert "marketing plan" in result.output
        content = out.read_text()
        assert content.startswith("# Spring Launch")
        assert "## 1. Research & Strategy" in content

    @pytest.mark.parametrize("name", ["Portal [/beta]", "Portal [beta]"])
    def test_bracketed_name_printed_verbatim(self, name: str) -> None:
        result = runner.invoke(app, ["plan", name, "billing"])
        assert result.exit_code == 0, result.output
        assert f"# {name}" in result.output


class TestRenderPlan:
    def test_includes_timeline_and_hours(self) -> None:
        params = PlanParams(project_name="Acme Portal", project_scope="internal tooling", timeline="Q1")
        rendered = render_plan(generate_plan(params), params)
        assert "**Timeline:** Q1" in rendered
        assert "- **Set up development environment** (🟠 High · 8h · devops)" in rendered

    def test_omits_timeline_when_absent(self) -> None:
        params = PlanParams(project_name="Acme Portal", project_scope="internal tooling")
        assert "Timeline" not in render_plan(generate_plan(params), params)


class TestCreatePlan:
    def test_creates_and_summarises(self) -> None:
        client = _mock_client()
        with patch("linplan.main.get_client", return_value=client):
            result = runner.invoke(
                app, ["create-plan", "Acme Portal", "internal tooling", "--team", "t1", "--tech", "Postgres"]
            )
        assert result.exit_code == 0, result.output
        assert "ENG-11" in result.output
        assert "2 issues" in result.output
        team_id, params = client.create_project_with_plan.await_args.args
        assert team_id == "t1"
        assert params.technical_requirements == ["Postgres"]

    def test_bracketed_project_name_in_table_title(self) -> None:
        client = _mock_client()
        client.create_project_with_plan.return_value = ProjectWithPlan(
            project=Project(id="proj_2", name="Portal [/beta]"),
            milestones=[CreatedMilestone(milestone=_issue(10, "Milestone: [draft]"), issues=[])],
        )
        with patch("linplan.main.get_client", return_value=client):
            result = runner.invoke(app, ["create-plan", "Portal [/beta]", "billing", "--team", "t1"])
        assert result.exit_code == 0, result.output
        assert "Portal [/beta]" in result.output
        assert "Milestone: [draft]" in result.output


class TestSetDefault:
    def test_creates_config_if_missing(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.toml"
        with patch("linplan.main.CONFIG_PATH", config_path):
            result = runner.invoke(app, ["set-default", "work"])
        assert result.exit_code == 0
        config = tomlkit.load(config_path.open())
        assert config["default_profile"] == "work"

    def test_validates_profile_exists(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.toml"
        doc = tomlkit.document()
        doc.add("work", {"api_key": "lin_api_work"})
        config_path.write_text(tomlkit.dumps(doc))
        with patch("linplan.main.CONFIG_PATH", config_path):
            result = runner.invoke(app, ["set-default", "nonexistent"])
        assert result.exit_code != 0


class TestConfigShow:
    def test_masks_api_key(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings_module, "CONFIG_PATH", tmp_path / "missing.toml")
        monkeypatch.delenv("LINPLAN_DEFAULT_PROFILE", raising=False)
        monkeypatch.setenv("LINPLAN_API_KEY", "lin_api_secretvalue12345")
        result = runner.invoke(app, ["config-show"])
        assert result.exit_code == 0
        assert "12345" in result.output
        assert "secretvalue" not in result.output
