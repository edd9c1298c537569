"""Static plan templates, one per industry.

Text fields may contain these placeholders, filled in by planner.generate_plan:

    {project_name}            PlanParams.project_name
    {project_scope}           PlanParams.project_scope
    {technical_requirements}  comma-joined requirements, or "all technical requirements"
    {target_audience}         PlanParams.target_audience, or "target audiences"
    {audience_segments}       PlanParams.target_audience, or "target audience segments"
"""

from pydantic import BaseModel, ConfigDict

from linplan.models import Plan


class PlanTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str  # "software" | "marketing" | "design" | "generic"
    plan: Plan


SOFTWARE = PlanTemplate(
    name="software",
    plan=Plan.model_validate(
        {
            "project_description": (
                "{project_name}: A software development project focusing on {project_scope}. "
                "This project will implement a comprehensive solution that addresses key challenges "
                "in this domain while ensuring scalability, security, and excellent user experience."
            ),
            "milestones": [
                {
                    "title": "Requirements & Planning",
                    "description": (
                        "Define detailed requirements, create technical specifications, "
                        "and establish project timeline."
                    ),
                    "issues": [
                        {
                            "title": "Create detailed user stories",
                            "description": (
                                "Document comprehensive user stories with acceptance criteria "
                                "for all main features."
                            ),
                            "priority": 2,
                            "labels": ["documentation", "planning"],
                        },
                        {
                            "title": "Define technical architecture",
                            "description": (
                                "Design the system architecture considering {technical_requirements}. "
                                "Include diagrams, API specifications, and data models."
                            ),
                            "priority": 1,
                            "labels": ["architecture", "planning"],
                        },
                        {
                            "title": "Set up development environment",
                            "description": (
                                "Configure development, staging, and production environments with CI/CD pipelines."
                            ),
                            "priority": 2,
                            "estimated_hours": 8,
                            "labels": ["devops"],
                        },
                    ],
                },
                {
                    "title": "Design & Prototyping",
                    "description": "Create UI/UX designs and interactive prototypes for key user flows.",
                    "issues": [
                        {
                            "title": "Create wireframes for all main screens",
                            "description": (
                                "Design low-fidelity wireframes for all core user flows and get stakeholder approval."
                            ),
                            "priority": 2,
                            "estimated_hours": 12,
                            "labels": ["design", "ux"],
                        },
                        {
                            "title": "Develop high-fidelity mockups",
                            "description": (
                                "Create detailed visual designs based on approved wireframes, "
                                "including responsive variations."
                            ),
                            "priority": 2,
                            "estimated_hours": 16,
                            "labels": ["design", "ui"],
                        },
                        {
                            "title": "Build interactive prototype",
                            "description": (
                                "Create clickable prototype demonstrating key user flows "
                                "for testing and stakeholder review."
                            ),
                            "priority": 3,
                            "estimated_hours": 10,
                            "labels": ["prototype", "ux"],
                        },
                    ],
                },
                {
                    "title": "Core Development",
                    "description": "Implement the fundamental features and establish the technical foundation.",
                    "issues": [
                        {
                            "title": "Set up database schema and migrations",
                            "description": (
                                "Design and implement database structure with proper indexing, "
                                "relationships, and optimization."
                            ),
                            "priority": 1,
                            "estimated_hours": 8,
                            "labels": ["backend", "database"],
                        },
                        {
                            "title": "Implement authentication system",
                            "description": (
                                "Create secure user authentication with role-based permissions, "
                                "password policies, and account recovery."
                            ),
                            "priority": 1,
                            "estimated_hours": 12,
                            "labels": ["security", "backend"],
                        },
                        {
                            "title": "Develop core API endpoints",
                            "description": (
                                "Implement RESTful or GraphQL API endpoints for core functionality "
                                "with proper validation and error handling."
                            ),
                            "priority": 1,
                            "estimated_hours": 20,
                            "labels": ["backend", "api"],
                        },
                    ],
                },
                {
                    "title": "Feature Implementation",
                    "description": "Build out all planned features according to specifications.",
                    "issues": [
                        {
                            "title": "Implement user dashboard",
                            "description": (
                                "Create the main user dashboard showing key metrics, recent activity, "
                                "and quick actions."
                            ),
                            "priority": 2,
                            "estimated_hours": 14,
                            "labels": ["frontend", "feature"],
                        },
                        {
                            "title": "Build search and filtering functionality",
                            "description": (
                                "Implement advanced search with filters, sorting options, "
                                "and saved searches capability."
                            ),
                            "priority": 2,
                            "estimated_hours": 10,
                            "labels": ["frontend", "feature"],
                        },
                        {
                            "title": "Create reporting module",
                            "description": (
                                "Develop customizable reports with data visualization, export options, "
                                "and scheduling features."
                            ),
                            "priority": 3,
                            "estimated_hours": 18,
                            "labels": ["frontend", "data", "feature"],
                        },
                    ],
                },
                {
                    "title": "Testing & Quality Assurance",
                    "description": "Ensure the application meets all requirements and functions correctly.",
                    "issues": [
                        {
                            "title": "Write unit tests for core functionality",
                            "description": "Create comprehensive test suite covering all critical paths and edge cases.",
                            "priority": 1,
                            "estimated_hours": 16,
                            "labels": ["testing", "quality"],
                        },
                        {
                            "title": "Perform integration testing",
                            "description": "Test interactions between different components and external services.",
                            "priority": 2,
                            "estimated_hours": 12,
                            "labels": ["testing", "quality"],
                        },
                        {
                            "title": "Conduct security audit",
                            "description": (
                                "Perform thorough security assessment including penetration testing "
                                "and vulnerability scanning."
                            ),
                            "priority": 1,
                            "estimated_hours": 8,
                            "labels": ["security", "quality"],
                        },
                    ],
                },
                {
                    "title": "Deployment & Launch",
                    "description": "Prepare for and execute the product launch.",
                    "issues": [
                        {
                            "title": "Create deployment documentation",
                            "description": (
                                "Document detailed deployment procedures, system requirements, "
                                "and configuration instructions."
                            ),
                            "priority": 2,
                            "estimated_hours": 6,
                            "labels": ["documentation", "devops"],
                        },
                        {
                            "title": "Perform load testing",
                            "description": "Test system performance under expected and peak loads, identify bottlenecks.",
                            "priority": 2,
                            "estimated_hours": 8,
                            "labels": ["testing", "performance"],
                        },
                        {
                            "title": "Execute production deployment",
                            "description": (
                                "Deploy to production environment following established procedures "
                                "with rollback strategy."
                            ),
                            "priority": 1,
                            "estimated_hours": 4,
                            "labels": ["devops", "release"],
                        },
                    ],
                },
            ],
        }
    ),
)

MARKETING = PlanTemplate(
    name="marketing",
    plan=Plan.model_validate(
        {
            "project_description": (
                "{project_name}: A comprehensive marketing initiative focused on {project_scope}. "
                "This campaign will increase brand awareness, engage {target_audience}, "
                "and drive measurable business outcomes."
            ),
            "milestones": [
                {
                    "title": "Research & Strategy",
                    "description": (
                        "Analyze market trends, competitor activities, and audience preferences "
                        "to form campaign strategy."
                    ),
                    "issues": [
                        {
                            "title": "Conduct market research",
                            "description": (
                                "Analyze current market trends, identify opportunities and threats, "
                                "and compile findings report."
                            ),
                            "priority": 1,
                            "labels": ["research", "strategy"],
                        },
                        {
                            "title": "Develop detailed audience personas",
                            "description": (
                                "Create comprehensive profiles of {audience_segments} including demographics, "
                                "behaviors, needs, and pain points."
                            ),
                            "priority": 2,
                            "labels": ["research", "audience"],
                        },
                        {
                            "title": "Formulate marketing strategy",
                            "description": (
                                "Develop overarching strategy including positioning, messaging, channels, and KPIs."
                            ),
                            "priority": 1,
                            "labels": ["strategy"],
                        },
                    ],
                },
                {
                    "title": "Content Creation",
                    "description": "Produce all campaign content assets across required formats and channels.",
                    "issues": [
                        {
                            "title": "Create messaging guidelines",
                            "description": (
                                "Develop tone of voice, key messages, and communication framework "
                                "for campaign consistency."
                            ),
                            "priority": 1,
                            "labels": ["content", "branding"],
                        },
                        {
                            "title": "Produce visual content",
                            "description": (
                                "Design campaign visuals including graphics, photography, videos, and animations."
                            ),
                            "priority": 2,
                            "labels": ["content", "design"],
                        },
                        {
                            "title": "Write copy for all channels",
                            "description": (
                                "Create compelling copy for website, social media, email, advertisements, "
                                "and other touchpoints."
                            ),
                            "priority": 2,
                            "labels": ["content", "copy"],
                        },
                    ],
                },
                {
                    "title": "Campaign Setup",
                    "description": "Configure digital platforms, establish tracking, and prepare for launch.",
                    "issues": [
                        {
                            "title": "Set up campaign tracking",
                            "description": (
                                "Implement analytics, attribution models, and reporting dashboards "
                                "for performance monitoring."
                            ),
                            "priority": 1,
                            "labels": ["analytics", "setup"],
                        },
                        {
                            "title": "Configure digital advertising",
                            "description": (
                                "Set up ad accounts, create audience segments, and prepare ad creatives "
                                "across platforms."
                            ),
                            "priority": 2,
                            "labels": ["advertising", "setup"],
                        },
                        {
                            "title": "Prepare email marketing sequence",
                            "description": (
                                "Build email templates, automation flows, and segmentation rules in email platform."
                            ),
                            "priority": 2,
                            "labels": ["email", "setup"],
                        },
                    ],
                },
                {
                    "title": "Campaign Execution",
                    "description": "Launch and actively manage all campaign elements.",
                    "issues": [
                        {
                            "title": "Execute multichannel launch",
                            "description": (
                                "Coordinate simultaneous activation across all channels according to campaign timeline."
                            ),
                            "priority": 1,
                            "labels": ["execution", "launch"],
                        },
                        {
                            "title": "Manage social media campaign",
                            "description": (
                                "Publish, monitor, and engage with content across social platforms "
                                "throughout campaign duration."
                            ),
                            "priority": 2,
                            "labels": ["social", "execution"],
                        },
                        {
                            "title": "Optimize advertising performance",
                            "description": (
                                "Monitor ad performance daily, adjust targeting, bidding, and creative elements "
                                "for maximum ROI."
                            ),
                            "priority": 2,
                            "labels": ["advertising", "optimization"],
                        },
                    ],
                },
                {
                    "title": "Analysis & Reporting",
                    "description": "Measure results, extract insights, and document campaign performance.",
                    "issues": [
                        {
                            "title": "Track KPI achievement",
                            "description": (
                                "Monitor performance against established KPIs, identify variances and success factors."
                            ),
                            "priority": 1,
                            "labels": ["analytics", "reporting"],
                        },
                        {
                            "title": "Conduct A/B test analysis",
                            "description": (
                                "Analyze results of all campaign experiments, document learnings and recommendations."
                            ),
                            "priority": 3,
                            "labels": ["testing", "analytics"],
                        },
                        {
                            "title": "Create comprehensive campaign report",
                            "description": (
                                "Compile detailed performance report with results, insights, "
                                "and recommendations for future campaigns."
                            ),
                            "priority": 2,
                            "labels": ["reporting", "documentation"],
                        },
                    ],
                },
            ],
        }
    ),
)

DESIGN = PlanTemplate(
    name="design",
    plan=Plan.model_validate(
        {
            "project_description": (
                "{project_name}: A design project focusing on {project_scope}. "
                "This project will deliver innovative, user-centered design solutions that balance "
                "aesthetic excellence with functional requirements."
            ),
            "milestones": [
                {
                    "title": "Research & Discovery",
                    "description": "Gather insights, understand requirements, and define design objectives.",
                    "issues": [
                        {
                            "title": "Conduct stakeholder interviews",
                            "description": (
                                "Interview key stakeholders to understand business goals, constraints, "
                                "and expectations."
                            ),
                            "priority": 1,
                            "labels": ["research", "discovery"],
                        },
                        {
                            "title": "Perform competitive analysis",
                            "description": (
                                "Analyze competitor designs, identify trends, strengths, weaknesses, "
                                "and opportunities."
                            ),
                            "priority": 2,
                            "labels": ["research", "analysis"],
                        },
                        {
                            "title": "Create design brief",
                            "description": (
                                "Document project scope, objectives, target audience, design requirements, "
                                "and constraints."
                            ),
                            "priority": 1,
                            "labels": ["documentation", "planning"],
                        },
                    ],
                },
                {
                    "title": "Concept Development",
                    "description": "Generate and explore design concepts and directions.",
                    "issues": [
                        {
                            "title": "Develop mood boards",
                            "description": (
                                "Create visual collections representing potential design directions, "
                                "styles, and aesthetics."
                            ),
                            "priority": 3,
                            "labels": ["concept", "visual"],
                        },
                        {
                            "title": "Sketch initial concepts",
                            "description": (
                                "Produce range of rough conceptual sketches exploring different approaches "
                                "and solutions."
                            ),
                            "priority": 1,
                            "labels": ["concept", "ideation"],
                        },
                        {
                            "title": "Present concept directions",
                            "description": (
                                "Prepare and deliver presentation of design concepts for stakeholder feedback "
                                "and direction selection."
                            ),
                            "priority": 2,
                            "labels": ["presentation", "concept"],
                        },
                    ],
                },
                {
                    "title": "Design Development",
                    "description": "Refine selected concept into comprehensive design solution.",
                    "issues": [
                        {
                            "title": "Create detailed wireframes",
                            "description": (
                                "Develop structured layouts defining information hierarchy and content placement."
                            ),
                            "priority": 1,
                            "labels": ["wireframe", "ux"],
                        },
                        {
                            "title": "Develop visual design system",
                            "description": (
                                "Create comprehensive design system including typography, color palette, "
                                "UI components, and usage guidelines."
                            ),
                            "priority": 1,
                            "labels": ["design system", "ui"],
                        },
                        {
                            "title": "Produce high-fidelity mockups",
                            "description": (
                                "Create detailed visual designs for all required screens, states, and variations."
                            ),
                            "priority": 2,
                            "labels": ["mockup", "ui"],
                        },
                    ],
                },
                {
                    "title": "Prototyping & Testing",
                    "description": "Create interactive prototypes and validate designs through testing.",
                    "issues": [
                        {
                            "title": "Build interactive prototype",
                            "description": (
                                "Create clickable prototype demonstrating user flows, interactions, and animations."
                            ),
                            "priority": 2,
                            "labels": ["prototype", "interaction"],
                        },
                        {
                            "title": "Conduct usability testing",
                            "description": (
                                "Test prototype with representative users, observe pain points, and gather feedback."
                            ),
                            "priority": 1,
                            "labels": ["testing", "ux"],
                        },
                        {
                            "title": "Iterate based on findings",
                            "description": (
                                "Refine design based on testing insights, addressing usability issues "
                                "and user feedback."
                            ),
                            "priority": 2,
                            "labels": ["iteration", "refinement"],
                        },
                    ],
                },
                {
                    "title": "Design Delivery",
                    "description": "Prepare and deliver final design assets and documentation.",
                    "issues": [
                        {
                            "title": "Create design specifications",
                            "description": (
                                "Document detailed specifications including measurements, spacing, "
                                "and styling information for implementation."
                            ),
                            "priority": 1,
                            "labels": ["documentation", "specification"],
                        },
                        {
                            "title": "Prepare asset package",
                            "description": (
                                "Export and organize all design assets in appropriate formats for development team."
                            ),
                            "priority": 1,
                            "labels": ["assets", "delivery"],
                        },
                        {
                            "title": "Create implementation guidelines",
                            "description": (
                                "Document guidance for developers on implementing animations, interactions, "
                                "and responsive behaviors."
                            ),
                            "priority": 2,
                            "labels": ["documentation", "implementation"],
                        },
                    ],
                },
            ],
        }
    ),
)

GENERIC = PlanTemplate(
    name="generic",
    plan=Plan.model_validate(
        {
            "project_description": (
                "{project_name}: A comprehensive project focusing on {project_scope}. "
                "This initiative will systematically address key objectives while ensuring quality, "
                "timeliness, and stakeholder satisfaction."
            ),
            "milestones": [
                {
                    "title": "Project Initiation",
                    "description": "Define project parameters, secure resources, and establish governance.",
                    "issues": [
                        {
                            "title": "Create project charter",
                            "description": (
                                "Document project purpose, objectives, scope, stakeholders, and success criteria."
                            ),
                            "priority": 1,
                            "labels": ["documentation", "planning"],
                        },
                        {
                            "title": "Develop detailed project plan",
                            "description": (
                                "Create comprehensive plan including timeline, dependencies, resources, and budget."
                            ),
                            "priority": 1,
                            "labels": ["planning"],
                        },
                        {
                            "title": "Establish project governance",
                            "description": (
                                "Define roles, responsibilities, communication protocols, "
                                "and decision-making processes."
                            ),
                            "priority": 2,
                            "labels": ["governance", "planning"],
                        },
                    ],
                },
                {
                    "title": "Requirements & Analysis",
                    "description": "Gather and analyze detailed requirements to inform project execution.",
                    "issues": [
                        {
                            "title": "Conduct stakeholder interviews",
                            "description": (
                                "Interview key stakeholders to gather requirements, expectations, and constraints."
                            ),
                            "priority": 1,
                            "labels": ["requirements", "research"],
                        },
                        {
                            "title": "Document detailed requirements",
                            "description": "Create comprehensive requirements documentation with acceptance criteria.",
                            "priority": 1,
                            "labels": ["requirements", "documentation"],
                        },
                        {
                            "title": "Perform feasibility analysis",
                            "description": "Assess technical, operational, and financial feasibility of requirements.",
                            "priority": 2,
                            "labels": ["analysis"],
                        },
                    ],
                },
                {
                    "title": "Design & Planning",
                    "description": "Create detailed designs and implementation plans.",
                    "issues": [
                        {
                            "title": "Develop solution architecture",
                            "description": "Design high-level solution addressing all requirements and constraints.",
                            "priority": 1,
                            "labels": ["design", "architecture"],
                        },
                        {
                            "title": "Create detailed work breakdown",
                            "description": "Break down work into manageable tasks with estimates and assignments.",
                            "priority": 1,
                            "labels": ["planning"],
                        },
                        {
                            "title": "Establish quality assurance plan",
                            "description": "Define QA approach, testing methodologies, and acceptance criteria.",
                            "priority": 2,
                            "labels": ["quality", "planning"],
                        },
                    ],
                },
                {
                    "title": "Implementation",
                    "description": "Execute project activities according to plan.",
                    "issues": [
                        {
                            "title": "Execute core deliverables",
                            "description": (
                                "Complete primary project deliverables according to requirements and specifications."
                            ),
                            "priority": 1,
                            "labels": ["implementation", "core"],
                        },
                        {
                            "title": "Perform regular progress reviews",
                            "description": (
                                "Conduct scheduled reviews to assess progress, quality, and alignment with objectives."
                            ),
                            "priority": 2,
                            "labels": ["monitoring", "review"],
                        },
                        {
                            "title": "Manage issues and risks",
                            "description": (
                                "Identify, document, and address emerging issues and risks throughout implementation."
                            ),
                            "priority": 1,
                            "labels": ["risk", "management"],
                        },
                    ],
                },
                {
                    "title": "Testing & Validation",
                    "description": "Verify project deliverables meet requirements and quality standards.",
                    "issues": [
                        {
                            "title": "Conduct comprehensive testing",
                            "description": "Test all deliverables against requirements and quality standards.",
                            "priority": 1,
                            "labels": ["testing", "quality"],
                        },
                        {
                            "title": "Facilitate stakeholder reviews",
                            "description": "Present deliverables to stakeholders for review and feedback.",
                            "priority": 2,
                            "labels": ["review", "stakeholder"],
                        },
                        {
                            "title": "Document validation results",
                            "description": "Record testing outcomes, stakeholder feedback, and validation status.",
                            "priority": 2,
                            "labels": ["documentation", "testing"],
                        },
                    ],
                },
                {
                    "title": "Deployment & Closure",
                    "description": "Deploy final deliverables and formally close the project.",
                    "issues": [
                        {
                            "title": "Execute deployment plan",
                            "description": "Implement deployment activities according to established plan.",
                            "priority": 1,
                            "labels": ["deployment", "implementation"],
                        },
                        {
                            "title": "Transfer project documentation",
                            "description": "Hand over all relevant documentation to appropriate stakeholders.",
                            "priority": 2,
                            "labels": ["documentation", "handover"],
                        },
                        {
                            "title": "Conduct project retrospective",
                            "description": "Facilitate session to review project success, challenges, and lessons learned.",
                            "priority": 2,
                            "labels": ["closure", "retrospective"],
                        },
                    ],
                },
            ],
        }
    ),
)

# Checked in order; first keyword found in the industry wins.
INDUSTRY_TEMPLATES: tuple[tuple[str, PlanTemplate], ...] = (
    ("software", SOFTWARE),
    ("marketing", MARKETING),
    ("design", DESIGN),
)
