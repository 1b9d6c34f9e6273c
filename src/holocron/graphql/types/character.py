"""
Character GraphQL interface and Episode enum
"""

import strawberry

from ... import models

Episode = strawberry.enum(models.Episode, description="One of the films in the Star Wars trilogy.")


@strawberry.interface(description="A character from the Star Wars universe.")
class Character:
    """Fields shared by every character variant.

    Each variant decides where its friends come from by implementing
    ``load_friends``; the engine picks the variant per returned instance.
    """

    id: strawberry.ID = strawberry.field(description="The unique identifier of the character.")
    name: str = strawberry.field(description="The name of the character.")
    appears_in: list[Episode] = strawberry.field(description="Which movies they appear in.")

    @strawberry.field(
        description="The friends of the character, or an empty list if they have none."
    )
    async def friends(self, info: strawberry.Info) -> list["Character"] | None:
        return await self.load_friends(info)

    async def load_friends(self, info: strawberry.Info) -> list["Character"]:
        raise NotImplementedError(
            f"{type(self).__name__} must implement load_friends; "
            "only the Droid and Human variants resolve friends"
        )
