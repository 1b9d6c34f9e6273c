"""Repository contracts the resolution layer fetches through."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from uuid import UUID

from ..cancellation import CancellationToken
from ..models import Character, Droid, Human


class RepositoryError(Exception):
    """Transient failure while fetching from a repository."""


class DroidRepository(ABC):
    """Async fetch operations for droids."""

    @abstractmethod
    async def get_droid(self, id: UUID, cancellation: CancellationToken) -> Droid | None:
        """Fetch a droid by its unique identifier, or None when absent."""

    @abstractmethod
    async def get_random_droid(self, cancellation: CancellationToken) -> Droid | None:
        """Fetch an arbitrary droid, or None when there are none."""

    @abstractmethod
    async def get_friends(
        self, droid: Droid, cancellation: CancellationToken
    ) -> list[Character]:
        """Fetch the friends of ``droid`` in their stored order."""


class HumanRepository(ABC):
    """Async fetch operations for humans."""

    @abstractmethod
    async def get_human(self, id: UUID, cancellation: CancellationToken) -> Human | None:
        """Fetch a human by its unique identifier, or None when absent."""

    @abstractmethod
    async def get_random_human(self, cancellation: CancellationToken) -> Human | None:
        """Fetch an arbitrary human, or None when there are none."""

    @abstractmethod
    async def get_friends(
        self, human: Human, cancellation: CancellationToken
    ) -> list[Character]:
        """Fetch the friends of ``human`` in their stored order."""


@dataclass(frozen=True)
class Repositories:
    """The repositories a request resolves against."""

    droids: DroidRepository
    humans: HumanRepository
