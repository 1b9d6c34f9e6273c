"""Built-in seed data used when no seed file is configured."""

from typing import Any

R2_D2_ID = "1ae34c3b-c1a0-4b7b-9375-c5a221d49e68"
C_3PO_ID = "c2bbf949-764b-4d4f-bce6-0404211810fa"
LUKE_ID = "94fbd693-2027-4804-bf40-ed427fe76fda"
VADER_ID = "7f7bf389-2cfb-45f4-b91e-9d95441c1ecc"
LEIA_ID = "5e4b2f3c-8a3d-4f6e-9b1a-2c7d8e9f0a1b"

SEED_CHARACTERS: list[dict[str, Any]] = [
    {
        "kind": "droid",
        "id": R2_D2_ID,
        "name": "R2-D2",
        "appears_in": [4, 5, 6],
        "friend_ids": [LUKE_ID, C_3PO_ID, LEIA_ID],
        "primary_function": "Astromech",
        "charge_period": "P1D",
        "created": "2010-01-01T00:00:00Z",
    },
    {
        "kind": "droid",
        "id": C_3PO_ID,
        "name": "C-3PO",
        "appears_in": [4, 5, 6],
        "friend_ids": [R2_D2_ID, LUKE_ID, LEIA_ID],
        "primary_function": "Protocol",
        "charge_period": "PT5H",
        "created": "2005-01-01T00:00:00Z",
    },
    {
        "kind": "human",
        "id": LUKE_ID,
        "name": "Luke Skywalker",
        "appears_in": [4, 5, 6],
        "friend_ids": [R2_D2_ID, C_3PO_ID, LEIA_ID],
        "date_of_birth": "1977-05-25",
        "home_planet": "Tatooine",
    },
    {
        "kind": "human",
        "id": VADER_ID,
        "name": "Darth Vader",
        "appears_in": [4, 5, 6],
        "friend_ids": [],
        "date_of_birth": "1941-05-25",
        "home_planet": "Tatooine",
    },
    {
        "kind": "human",
        "id": LEIA_ID,
        "name": "Leia Organa",
        "appears_in": [4, 5, 6],
        "friend_ids": [LUKE_ID, R2_D2_ID, C_3PO_ID],
        "date_of_birth": "1977-05-25",
        "home_planet": "Alderaan",
    },
]
