"""
Human GraphQL type definitions
"""

from datetime import date

import strawberry

from ... import models
from .character import Character


@strawberry.type(description="A humanoid creature from the Star Wars universe.")
class Human(Character):
    """Human type for GraphQL API."""

    date_of_birth: date = strawberry.field(description="The date of birth of the human.")
    home_planet: str | None = strawberry.field(
        description="The home planet of the human, or null if unknown."
    )

    record: strawberry.Private[models.Human]

    async def load_friends(self, info: strawberry.Info) -> list[Character]:
        from ..resolvers.character import resolve_human_friends

        return await resolve_human_friends(self, info)

    @classmethod
    def from_model(cls, human: models.Human) -> "Human":
        return cls(
            id=strawberry.ID(str(human.id)),
            name=human.name,
            appears_in=list(human.appears_in),
            date_of_birth=human.date_of_birth,
            home_planet=human.home_planet,
            record=human,
        )
