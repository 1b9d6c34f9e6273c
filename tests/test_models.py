"""
Unit tests for the domain records
"""

from datetime import timedelta
from uuid import UUID

import pytest
from pydantic import ValidationError

from holocron.models import (
    INFO,
    Droid,
    Episode,
    HasFriends,
    HasId,
    HasName,
    Human,
    characters_adapter,
)

from conftest import make_droid, make_human


class TestCharacterVariants:
    def test_kind_tag_selects_variant(self):
        characters = characters_adapter.validate_python(
            [
                {
                    "kind": "droid",
                    "id": "1ae34c3b-c1a0-4b7b-9375-c5a221d49e68",
                    "name": "R2-D2",
                    "charge_period": "P1D",
                    "created": "2010-01-01T00:00:00Z",
                },
                {
                    "kind": "human",
                    "id": "94fbd693-2027-4804-bf40-ed427fe76fda",
                    "name": "Luke Skywalker",
                    "date_of_birth": "1977-05-25",
                },
            ]
        )

        assert isinstance(characters[0], Droid)
        assert isinstance(characters[1], Human)
        assert characters[0].charge_period == timedelta(days=1)
        assert characters[1].home_planet is None
        assert characters[1].friend_ids == ()

    def test_unknown_kind_is_rejected(self):
        with pytest.raises(ValidationError):
            characters_adapter.validate_python(
                [{"kind": "wookiee", "id": "94fbd693-2027-4804-bf40-ed427fe76fda", "name": "x"}]
            )

    def test_records_are_immutable(self):
        droid = make_droid()

        with pytest.raises(ValidationError):
            droid.name = "Renamed"  # type: ignore[misc]

    def test_variant_tag_is_fixed_per_class(self):
        with pytest.raises(ValidationError):
            Droid(kind="human", id=UUID(int=1), name="x", created="2000-01-01T00:00:00Z")

    def test_capability_protocols(self):
        for character in (make_droid(), make_human()):
            assert isinstance(character, HasId)
            assert isinstance(character, HasName)
            assert isinstance(character, HasFriends)

    def test_episodes_are_a_closed_set(self):
        assert [episode.name for episode in Episode] == ["NEWHOPE", "EMPIRE", "JEDI"]


def test_info_literal():
    assert INFO.id == "ed7584-2124-98fs-00s3-t739478t"
    assert INFO.name == "maana.io.template"
    assert INFO.description == "Dockerized ASP.NET Core GraphQL Template"
