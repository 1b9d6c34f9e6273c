"""
Info GraphQL type definitions
"""

import strawberry

from ... import models


@strawberry.type(description="Static information about the service.")
class Info:
    id: str
    name: str
    description: str

    @classmethod
    def from_model(cls, info: models.Info) -> "Info":
        return cls(id=info.id, name=info.name, description=info.description)
