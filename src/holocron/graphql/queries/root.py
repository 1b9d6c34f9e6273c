"""
Root GraphQL query definitions

Example query for a human and the details of their friends::

    query getHuman {
      human(id: "94fbd693-2027-4804-bf40-ed427fe76fda") {
        id
        name
        dateOfBirth
        homePlanet
        appearsIn
        friends {
          name
          ... on Droid { chargePeriod created primaryFunction }
          ... on Human { dateOfBirth homePlanet }
        }
      }
    }
"""

from typing import Annotated

import strawberry

from ..arguments import DROID_ID, HUMAN_ID
from ..types.droid import Droid
from ..types.human import Human
from ..types.info import Info


@strawberry.type(
    description="The query type, represents all of the entry points into our object graph."
)
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Get a droid by its unique identifier.")
    async def droid(
        self,
        info: strawberry.Info,
        id: Annotated[
            strawberry.ID, strawberry.argument(description=DROID_ID.description)
        ] = strawberry.ID(DROID_ID.default),
    ) -> Droid | None:
        from ..resolvers.character import resolve_droid_by_id

        return await resolve_droid_by_id(info, id)

    @strawberry.field(description="Get a random droid from the database.")
    async def random_droid(self, info: strawberry.Info) -> Droid | None:
        from ..resolvers.character import resolve_random_droid

        return await resolve_random_droid(info)

    @strawberry.field(description="Get a human by its unique identifier.")
    async def human(
        self,
        info: strawberry.Info,
        id: Annotated[
            strawberry.ID, strawberry.argument(description=HUMAN_ID.description)
        ] = strawberry.ID(HUMAN_ID.default),
    ) -> Human | None:
        from ..resolvers.character import resolve_human_by_id

        return await resolve_human_by_id(info, id)

    @strawberry.field(description="Get a random human from the database.")
    async def random_human(self, info: strawberry.Info) -> Human | None:
        from ..resolvers.character import resolve_random_human

        return await resolve_random_human(info)

    # Static, not backed by a repository
    @strawberry.field(description="Information about this service.")
    def info(self) -> Info:
        from ..resolvers.info import resolve_info

        return resolve_info()
