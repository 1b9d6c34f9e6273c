"""
Droid GraphQL type definitions
"""

from datetime import datetime

import strawberry

from ... import models
from .character import Character
from .scalars import Duration


@strawberry.type(description="A mechanical creature in the Star Wars universe.")
class Droid(Character):
    """Droid type for GraphQL API."""

    primary_function: str | None = strawberry.field(
        description="The primary function of the droid."
    )
    charge_period: Duration = strawberry.field(  # type: ignore[valid-type]
        description="How long the droid runs on a full charge."
    )
    created: datetime = strawberry.field(description="When the droid was manufactured.")

    record: strawberry.Private[models.Droid]

    async def load_friends(self, info: strawberry.Info) -> list[Character]:
        from ..resolvers.character import resolve_droid_friends

        return await resolve_droid_friends(self, info)

    @classmethod
    def from_model(cls, droid: models.Droid) -> "Droid":
        return cls(
            id=strawberry.ID(str(droid.id)),
            name=droid.name,
            appears_in=list(droid.appears_in),
            primary_function=droid.primary_function,
            charge_period=droid.charge_period,
            created=droid.created,
            record=droid,
        )
