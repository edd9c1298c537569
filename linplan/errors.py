"""Exception hierarchy for linplan."""


class LinplanError(Exception):
    """Base class for every error raised by linplan itself."""


class GatewayError(LinplanError):
    """The Linear API rejected a request (GraphQL errors or success=false)."""


class NotFoundError(GatewayError):
    """A lookup by id returned nothing."""


class OrchestrationError(LinplanError):
    """A multi-step workflow hit a condition it cannot continue from."""


class ProjectIdMissingError(OrchestrationError):
    def __init__(self) -> None:
        super().__init__("Failed to get project ID from creation response")
