"""
Error types raised by the resolution layer
"""

from typing import Any


class HolocronError(Exception):
    """Base class for errors surfaced on a single field of a response.

    graphql-core copies ``extensions`` from the original exception onto the
    located GraphQL error, so ``code`` reaches the client.
    """

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, **self.details}


class ArgumentBindingError(HolocronError):
    """A caller-supplied argument failed type or shape validation."""

    code = "BAD_USER_INPUT"


class FetchError(HolocronError):
    """A repository operation failed or timed out."""

    code = "FETCH_FAILED"
