"""In-memory repositories over a read-only character store."""

from __future__ import annotations

import asyncio
import random
from collections.abc import Iterable
from pathlib import Path
from typing import Any
from uuid import UUID

import yaml

from ..cancellation import CancellationToken
from ..logging import get_logger
from ..models import Character, Droid, FriendSource, Human, characters_adapter
from .base import DroidRepository, HumanRepository, Repositories
from .data import SEED_CHARACTERS

logger = get_logger(__name__)


class CharacterStore:
    """Immutable snapshot of every character, indexed per variant.

    Built once and only read afterwards, so concurrent requests share it freely.
    Friend ids are bare UUIDs, so an id may belong to only one variant.
    """

    def __init__(self, characters: Iterable[Droid | Human]):
        droids: dict[UUID, Droid] = {}
        humans: dict[UUID, Human] = {}
        for character in characters:
            index: dict[UUID, Any] = droids if character.kind == "droid" else humans
            other: dict[UUID, Any] = humans if character.kind == "droid" else droids
            if character.id in index:
                raise ValueError(f"Duplicate {character.kind} id: {character.id}")
            if character.id in other:
                raise ValueError(
                    f"Id {character.id} is used by both a droid and a human; "
                    "friend references would be ambiguous"
                )
            index[character.id] = character
        self.droids = droids
        self.humans = humans

    @classmethod
    def from_records(cls, records: list[dict[str, Any]]) -> CharacterStore:
        return cls(characters_adapter.validate_python(records))

    def lookup(self, id: UUID) -> Droid | Human | None:
        return self.droids.get(id) or self.humans.get(id)

    def friends_of(self, character: FriendSource) -> list[Character]:
        """Resolve friend ids in order, skipping ids that no longer exist."""
        friends = []
        for friend_id in character.friend_ids:
            friend = self.lookup(friend_id)
            if friend is None:
                logger.debug(
                    "Skipping unknown friend id",
                    character_id=str(character.id),
                    friend_id=str(friend_id),
                )
                continue
            friends.append(friend)
        return friends


def load_seed_file(path: str | Path) -> CharacterStore:
    """Load a character store from a YAML or JSON seed file.

    The file holds either a list of character records or a mapping with a
    ``characters`` key.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or []

    if isinstance(data, dict):
        data = data.get("characters", []) or []

    store = CharacterStore.from_records(list(data))
    logger.info(
        "Loaded seed data",
        path=str(path),
        droids=len(store.droids),
        humans=len(store.humans),
    )
    return store


class _InMemoryRepository:
    def __init__(
        self, store: CharacterStore, latency: float = 0.0, rng: random.Random | None = None
    ):
        self.store = store
        self.latency = latency
        self.rng = rng or random.Random()

    async def _simulate_io(self, cancellation: CancellationToken) -> None:
        if self.latency > 0:
            await cancellation.run(asyncio.sleep(self.latency))
        else:
            cancellation.raise_if_cancelled()


class InMemoryDroidRepository(_InMemoryRepository, DroidRepository):
    async def get_droid(self, id: UUID, cancellation: CancellationToken) -> Droid | None:
        await self._simulate_io(cancellation)
        return self.store.droids.get(id)

    async def get_random_droid(self, cancellation: CancellationToken) -> Droid | None:
        await self._simulate_io(cancellation)
        if not self.store.droids:
            return None
        return self.rng.choice(list(self.store.droids.values()))

    async def get_friends(self, droid: Droid, cancellation: CancellationToken) -> list[Character]:
        await self._simulate_io(cancellation)
        return self.store.friends_of(droid)


class InMemoryHumanRepository(_InMemoryRepository, HumanRepository):
    async def get_human(self, id: UUID, cancellation: CancellationToken) -> Human | None:
        await self._simulate_io(cancellation)
        return self.store.humans.get(id)

    async def get_random_human(self, cancellation: CancellationToken) -> Human | None:
        await self._simulate_io(cancellation)
        if not self.store.humans:
            return None
        return self.rng.choice(list(self.store.humans.values()))

    async def get_friends(self, human: Human, cancellation: CancellationToken) -> list[Character]:
        await self._simulate_io(cancellation)
        return self.store.friends_of(human)


def create_memory_repositories(
    store: CharacterStore | None = None,
    *,
    latency: float = 0.0,
    random_seed: int | None = None,
) -> Repositories:
    """Build both repositories over one shared store."""
    if store is None:
        store = CharacterStore.from_records(SEED_CHARACTERS)
    rng = random.Random(random_seed)
    return Repositories(
        droids=InMemoryDroidRepository(store, latency, rng),
        humans=InMemoryHumanRepository(store, latency, rng),
    )
