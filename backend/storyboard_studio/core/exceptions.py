"""
Domain errors raised by the service layer.

Routes and MCP tools never build these themselves; they let the service
raise and the transport decides how to render it (see ``main.py`` for the
HTTP status mapping).
"""


class StoryboardStudioError(Exception):
    """Base class for every error the services raise on purpose."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StoryboardStudioError):
    """Input is malformed or breaks a data rule."""


class NotFoundError(StoryboardStudioError):
    """A referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(StoryboardStudioError):
    """The write would duplicate a unique relationship or collide with a running operation."""


class StoreError(StoryboardStudioError):
    """Persistence failed for a reason not covered above."""
