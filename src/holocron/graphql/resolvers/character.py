from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TYPE_CHECKING, TypeVar

import strawberry

from ... import models
from ...config import settings
from ...errors import FetchError
from ...logging import get_logger
from ...repositories import RepositoryError
from ..arguments import DROID_ID, HUMAN_ID
from ..context import get_cancellation, get_repositories

if TYPE_CHECKING:
    from ..types.character import Character
    from ..types.droid import Droid
    from ..types.human import Human

logger = get_logger(__name__)

T = TypeVar("T")


async def fetch(operation: str, call: Awaitable[T]) -> T:
    """Await a repository call, turning transient failures into a field error.

    Cancellation is not caught: it belongs to the whole request.
    """
    try:
        return await asyncio.wait_for(call, timeout=settings.fetch_timeout)
    except TimeoutError as e:
        logger.warning("Repository call timed out", operation=operation)
        raise FetchError(f"{operation} timed out", operation=operation) from e
    except RepositoryError as e:
        logger.warning("Repository call failed", operation=operation, error=str(e))
        raise FetchError(f"{operation} failed: {e}", operation=operation) from e


def to_character_type(character: models.Droid | models.Human) -> Character:
    """Convert a domain record into the GraphQL type matching its variant tag."""
    from ..types.droid import Droid
    from ..types.human import Human

    if character.kind == "droid":
        return Droid.from_model(character)
    return Human.from_model(character)


# Query resolvers
async def resolve_droid_by_id(info: strawberry.Info, id: str | None) -> Droid | None:
    """Resolve a droid by its ID, or None when no droid matches."""
    from ..types.droid import Droid

    droid_id = DROID_ID.bind(id)
    repositories = get_repositories(info)

    droid = await fetch(
        "get_droid", repositories.droids.get_droid(droid_id, get_cancellation(info))
    )
    if droid is None:
        logger.info("Droid not found", droid_id=str(droid_id))
        return None

    return Droid.from_model(droid)


async def resolve_random_droid(info: strawberry.Info) -> Droid | None:
    from ..types.droid import Droid

    repositories = get_repositories(info)
    droid = await fetch(
        "get_random_droid", repositories.droids.get_random_droid(get_cancellation(info))
    )
    return Droid.from_model(droid) if droid else None


async def resolve_human_by_id(info: strawberry.Info, id: str | None) -> Human | None:
    """Resolve a human by its ID, or None when no human matches."""
    from ..types.human import Human

    human_id = HUMAN_ID.bind(id)
    repositories = get_repositories(info)

    human = await fetch(
        "get_human", repositories.humans.get_human(human_id, get_cancellation(info))
    )
    if human is None:
        logger.info("Human not found", human_id=str(human_id))
        return None

    return Human.from_model(human)


async def resolve_random_human(info: strawberry.Info) -> Human | None:
    from ..types.human import Human

    repositories = get_repositories(info)
    human = await fetch(
        "get_random_human", repositories.humans.get_random_human(get_cancellation(info))
    )
    return Human.from_model(human) if human else None


# Field resolvers
async def resolve_droid_friends(droid: Droid, info: strawberry.Info) -> list[Character]:
    """Fetch a droid's friends through the droid repository."""
    repositories = get_repositories(info)
    friends = await fetch(
        "get_droid_friends",
        repositories.droids.get_friends(droid.record, get_cancellation(info)),
    )
    return [to_character_type(friend) for friend in friends]


async def resolve_human_friends(human: Human, info: strawberry.Info) -> list[Character]:
    """Fetch a human's friends through the human repository."""
    repositories = get_repositories(info)
    friends = await fetch(
        "get_human_friends",
        repositories.humans.get_friends(human.record, get_cancellation(info)),
    )
    return [to_character_type(friend) for friend in friends]
