"""
Domain records for the character graph

Droid and Human form a closed tagged variant under Character: the ``kind``
literal is fixed at creation and is what resolution dispatches on.
"""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Annotated, Literal, Protocol, runtime_checkable
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Episode(Enum):
    """One of the films in the Star Wars trilogy."""

    NEWHOPE = 4
    EMPIRE = 5
    JEDI = 6


@runtime_checkable
class HasId(Protocol):
    id: UUID


@runtime_checkable
class HasName(Protocol):
    name: str


@runtime_checkable
class HasFriends(Protocol):
    friend_ids: tuple[UUID, ...]


@runtime_checkable
class FriendSource(HasId, HasFriends, Protocol):
    """Anything whose friend references a store can resolve."""


class _CharacterRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    appears_in: tuple[Episode, ...] = ()
    friend_ids: tuple[UUID, ...] = ()


class Droid(_CharacterRecord):
    """A mechanical creature in the Star Wars universe."""

    kind: Literal["droid"] = "droid"
    primary_function: str | None = None
    charge_period: timedelta = timedelta(0)
    created: datetime


class Human(_CharacterRecord):
    """A humanoid creature in the Star Wars universe."""

    kind: Literal["human"] = "human"
    date_of_birth: date
    home_planet: str | None = None


Character = Annotated[Droid | Human, Field(discriminator="kind")]

characters_adapter: TypeAdapter[list[Droid | Human]] = TypeAdapter(list[Character])


class Info(BaseModel):
    """Static description of the running service."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str


INFO = Info(
    id="ed7584-2124-98fs-00s3-t739478t",
    name="maana.io.template",
    description="Dockerized ASP.NET Core GraphQL Template",
)
