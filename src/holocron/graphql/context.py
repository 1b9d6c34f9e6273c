"""
Per-request GraphQL context
"""

from typing import Any

import strawberry

from ..cancellation import CancellationToken
from ..repositories import Repositories


def build_context(
    repositories: Repositories,
    cancellation: CancellationToken | None = None,
    request: Any = None,
) -> dict[str, Any]:
    """Build the context dict handed to every resolver of one request."""
    return {
        "request": request,
        "repositories": repositories,
        "cancellation": cancellation or CancellationToken(),
    }


def get_repositories(info: strawberry.Info) -> Repositories:
    return info.context["repositories"]


def get_cancellation(info: strawberry.Info) -> CancellationToken:
    return info.context["cancellation"]
