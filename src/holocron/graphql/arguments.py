"""
Argument declarations and binding for root query fields
"""

from dataclasses import dataclass
from uuid import UUID

from ..errors import ArgumentBindingError


@dataclass(frozen=True)
class IdArgument:
    """An ``id`` argument with a literal fallback used when it is omitted."""

    name: str
    description: str
    default: str

    def bind(self, value: str | None) -> UUID:
        """Parse the raw argument into a UUID, substituting the default when omitted.

        Raises:
            ArgumentBindingError: If the value is not a unique identifier
        """
        raw = self.default if value is None else value
        try:
            return UUID(str(raw))
        except ValueError as e:
            raise ArgumentBindingError(
                f"Argument '{self.name}' must be a unique identifier, got {raw!r}",
                argument=self.name,
            ) from e


DEFAULT_DROID_ID = "1ae34c3b-c1a0-4b7b-9375-c5a221d49e68"
DEFAULT_HUMAN_ID = "94fbd693-2027-4804-bf40-ed427fe76fda"

DROID_ID = IdArgument(
    name="id",
    description="The unique identifier of the droid.",
    default=DEFAULT_DROID_ID,
)

HUMAN_ID = IdArgument(
    name="id",
    description="The unique identifier of the human.",
    default=DEFAULT_HUMAN_ID,
)
