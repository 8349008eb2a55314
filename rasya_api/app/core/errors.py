"""
Domain exceptions raised by the service layer.

Services signal invalid input with ``ValueError`` (message shown to the
client as is).  The subclasses below let endpoints choose a more
specific status code; because they derive from ``ValueError`` any
caller that only handles ``ValueError`` keeps working.
"""


class NotFoundError(ValueError):
    """The requested record does not exist (HTTP 404)."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class ConflictError(ValueError):
    """The record exists but is in a state that forbids the action (HTTP 409)."""


class GatewayError(RuntimeError):
    """A third‑party service (Google, Midtrans) could not be reached."""


class SigningError(RuntimeError):
    """The signature could not be placed on the uploaded PDF."""
