from ...models import INFO
from ..types.info import Info


def resolve_info() -> Info:
    """Return the static service info. Never touches a repository."""
    return Info.from_model(INFO)
