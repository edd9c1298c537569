"""Plan generation from templates, and materialising a plan as Linear issues."""

import logging

from linplan.errors import ProjectIdMissingError
from linplan.models import (
    CreatedMilestone,
    IssueSpec,
    IssueTemplate,
    Milestone,
    Plan,
    PlanParams,
    ProjectSpec,
    ProjectWithPlan,
)
from linplan.providers.base import ProjectGateway
from linplan.templates import GENERIC, INDUSTRY_TEMPLATES, SOFTWARE, PlanTemplate

logger = logging.getLogger(__name__)

MILESTONE_LABEL = "milestone"
MILESTONE_PRIORITY = 1

# ---------------------------------------------------------------------------
# Template selection
# ---------------------------------------------------------------------------


def select_template(industry: str | None) -> PlanTemplate:
    """Pick the plan template for an industry string.

    No industry means software. Otherwise the first of software / marketing /
    design found (case-insensitively) anywhere in the string wins, so
    "Marketing Design" is a marketing plan. Anything else gets the generic plan.
    """
    if not industry:
        return SOFTWARE
    lowered = industry.lower()
    for keyword, template in INDUSTRY_TEMPLATES:
        if keyword in lowered:
            return template
    return GENERIC


def _template_context(params: PlanParams) -> dict[str, str]:
    return {
        "project_name": params.project_name,
        "project_scope": params.project_scope,
        "technical_requirements": ", ".join(params.technical_requirements) or "all technical requirements",
        "target_audience": params.target_audience or "target audiences",
        "audience_segments": params.target_audience or "target audience segments",
    }


def _render_issue(issue: IssueTemplate, context: dict[str, str]) -> IssueTemplate:
    return issue.model_copy(
        update={
            "title": issue.title.format_map(context),
            "description": issue.description.format_map(context),
        }
    )


def generate_plan(params: PlanParams) -> Plan:
    """Instantiate the template matching params.industry. Pure, no I/O."""
    template = select_template(params.industry)
    context = _template_context(params)
    return Plan(
        project_description=template.plan.project_description.format_map(context),
        milestones=tuple(
            Milestone(
                title=m.title.format_map(context),
                description=m.description.format_map(context),
                issues=tuple(_render_issue(i, context) for i in m.issues),
            )
            for m in template.plan.milestones
        ),
    )


# ---------------------------------------------------------------------------
# Issue descriptions
# ---------------------------------------------------------------------------

# Every keyword found in the base description adds its block, in this order.
GUIDANCE_BLOCKS: tuple[tuple[str, str], ...] = (
    (
        "database",
        "### Database Work\n"
        "- Write migrations that can be rolled back\n"
        "- Add indexes for any new query patterns\n"
        "- Back up affected tables before migrating production\n",
    ),
    (
        "api",
        "### API Development\n"
        "- Document request and response shapes for new endpoints\n"
        "- Validate inputs and return consistent error responses\n"
        "- Keep existing clients working or version the endpoint\n",
    ),
    (
        "ui",
        "### UI Implementation\n"
        "- Use existing design system components\n"
        "- Check layouts at mobile and desktop widths\n"
        "- Verify keyboard navigation and screen reader labels\n",
    ),
    (
        "test",
        "### Testing Notes\n"
        "- Cover the main success path and the expected failure cases\n"
        "- Keep tests independent of external services\n",
    ),
    (
        "security",
        "### Security Review\n"
        "- Review authentication and authorization paths touched by this change\n"
        "- Keep secrets and personal data out of logs\n"
        "- Run dependency and static analysis scans before merging\n",
    ),
)


def guidance_for(base_description: str) -> list[str]:
    lowered = base_description.lower()
    return [block for keyword, block in GUIDANCE_BLOCKS if keyword in lowered]


def expand_issue_description(base_description: str, params: PlanParams, guidance: bool = True) -> str:
    """Build the markdown description for an issue created from a plan template.

    Args:
        base_description: The template issue's own description.
        params: Plan parameters; name, scope and technical requirements are used.
        guidance: Append keyword-matched implementation guidance blocks.

    Returns:
        Markdown with Overview, Context, optional Technical Considerations,
        optional Implementation Guidance, Acceptance Criteria and Additional
        Resources sections.
    """
    sections = [f"## Overview\n{base_description}\n\n"]

    sections.append(
        f"## Context\nThis task is part of the {params.project_name} project, "
        f"focusing on {params.project_scope}.\n\n"
    )

    if params.technical_requirements:
        sections.append("## Technical Considerations\n")
        for requirement in params.technical_requirements:
            sections.append(f"- Consider {requirement} when implementing this task\n")
        sections.append("\n")

    blocks = guidance_for(base_description) if guidance else []
    if blocks:
        sections.append("## Implementation Guidance\n")
        sections.append("\n".join(blocks))
        sections.append("\n")

    sections.append(
        "## Acceptance Criteria\n"
        "- Functionality works as described\n"
        "- Code follows project standards\n"
        "- Documentation is updated\n"
        "- Tests are written and passing\n\n"
    )

    sections.append(
        "## Additional Resources\n"
        "- Refer to project documentation for more details\n"
        "- Consult with team members if clarification is needed\n"
    )

    return "".join(sections)


# ---------------------------------------------------------------------------
# Plan -> Linear
# ---------------------------------------------------------------------------


async def create_project_with_plan(gateway: ProjectGateway, team_id: str, params: PlanParams) -> ProjectWithPlan:
    """Create a project and one marker issue plus child issues per milestone.

    Issues are created one at a time in plan order. The first failure stops the
    run; anything already created stays in Linear.
    """
    try:
        plan = generate_plan(params)
        project = await gateway.create_project(
            ProjectSpec(name=params.project_name, team_id=team_id, description=plan.project_description)
        )
        project_id = getattr(project, "id", None)
        if not project_id:
            raise ProjectIdMissingError()
        logger.info("Created project %s with %d milestones", project_id, len(plan.milestones))

        created_milestones = []
        for milestone in plan.milestones:
            marker = await gateway.create_issue(
                IssueSpec(
                    title=f"Milestone: {milestone.title}",
                    description=milestone.description,
                    team_id=team_id,
                    project_id=project_id,
                    priority=MILESTONE_PRIORITY,
                    labels=[MILESTONE_LABEL],
                )
            )

            created_issues = []
            for issue in milestone.issues:
                created_issues.append(
                    await gateway.create_issue(
                        IssueSpec(
                            title=issue.title,
                            description=expand_issue_description(issue.description, params),
                            team_id=team_id,
                            project_id=project_id,
                            priority=issue.priority,
                            labels=list(issue.labels),
                        )
                    )
                )
            logger.debug("Milestone '%s': %d issues", milestone.title, len(created_issues))
            created_milestones.append(CreatedMilestone(milestone=marker, issues=created_issues))

        return ProjectWithPlan(project=project, milestones=created_milestones)
    except Exception:
        logger.error("Error creating project with plan", exc_info=True)
        raise
