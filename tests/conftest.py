"""
Shared pytest fixtures and configuration for all tests.
"""

import asyncio
from collections.abc import Generator
from datetime import UTC, date, datetime, timedelta
from typing import Any
from uuid import UUID, uuid4

import pytest

from holocron.cancellation import CancellationToken
from holocron.config import settings
from holocron.models import Character, Droid, Episode, Human
from holocron.repositories import (
    DroidRepository,
    HumanRepository,
    Repositories,
    create_memory_repositories,
)


class FakeRepository:
    """Scriptable repository used to inject failures, stalls and cancellation."""

    def __init__(
        self,
        entities: list[Any] | None = None,
        friends: list[Character] | None = None,
        error: Exception | None = None,
        friends_error: Exception | None = None,
        stall: bool = False,
    ):
        self.entities = {entity.id: entity for entity in entities or []}
        self.friends = friends or []
        self.error = error
        self.friends_error = friends_error
        self.stall = stall
        self.started = asyncio.Event()
        self.cancelled = False
        self.calls: list[str] = []

    async def _call(self, name: str, cancellation: CancellationToken, error: Exception | None):
        self.calls.append(name)
        self.started.set()
        try:
            if self.stall:
                await cancellation.run(asyncio.Event().wait())
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if error is not None:
            raise error

    async def _get(self, id: UUID, cancellation: CancellationToken):
        await self._call("get", cancellation, self.error)
        return self.entities.get(id)

    async def _random(self, cancellation: CancellationToken):
        await self._call("random", cancellation, self.error)
        return next(iter(self.entities.values()), None)

    async def get_friends(self, parent, cancellation: CancellationToken) -> list[Character]:
        await self._call("friends", cancellation, self.friends_error)
        return list(self.friends)


class FakeDroidRepository(FakeRepository, DroidRepository):
    async def get_droid(self, id, cancellation):
        return await self._get(id, cancellation)

    async def get_random_droid(self, cancellation):
        return await self._random(cancellation)


class FakeHumanRepository(FakeRepository, HumanRepository):
    async def get_human(self, id, cancellation):
        return await self._get(id, cancellation)

    async def get_random_human(self, cancellation):
        return await self._random(cancellation)


def make_droid(**overrides: Any) -> Droid:
    values: dict[str, Any] = {
        "id": uuid4(),
        "name": "IG-88",
        "appears_in": (Episode.EMPIRE,),
        "primary_function": "Assassin",
        "charge_period": timedelta(hours=12),
        "created": datetime(2000, 1, 1, tzinfo=UTC),
    }
    values.update(overrides)
    return Droid(**values)


def make_human(**overrides: Any) -> Human:
    values: dict[str, Any] = {
        "id": uuid4(),
        "name": "Han Solo",
        "appears_in": (Episode.NEWHOPE, Episode.EMPIRE, Episode.JEDI),
        "date_of_birth": date(1942, 7, 13),
        "home_planet": "Corellia",
    }
    values.update(overrides)
    return Human(**values)


@pytest.fixture
def repositories() -> Repositories:
    """In-memory repositories over the built-in seed data."""
    return create_memory_repositories(random_seed=7)


@pytest.fixture
def fake_droids() -> FakeDroidRepository:
    return FakeDroidRepository()


@pytest.fixture
def fake_humans() -> FakeHumanRepository:
    return FakeHumanRepository()


@pytest.fixture
def fake_repositories(
    fake_droids: FakeDroidRepository, fake_humans: FakeHumanRepository
) -> Repositories:
    return Repositories(droids=fake_droids, humans=fake_humans)


@pytest.fixture(autouse=True)
def reset_fetch_timeout() -> Generator[None, None, None]:
    """Restore the global fetch timeout after tests that shorten it."""
    original = settings.fetch_timeout
    yield
    settings.fetch_timeout = original


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
