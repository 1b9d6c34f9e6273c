"""
Character repositories
"""

from ..config import settings
from ..logging import get_logger
from .base import DroidRepository, HumanRepository, Repositories, RepositoryError
from .memory import CharacterStore, create_memory_repositories, load_seed_file

logger = get_logger(__name__)


def create_repositories() -> Repositories:
    """Create repositories based on application settings."""
    store = load_seed_file(settings.seed_data_path) if settings.seed_data_path else None
    repositories = create_memory_repositories(
        store,
        latency=settings.repository_latency,
        random_seed=settings.random_seed,
    )
    logger.info(
        "Repositories created",
        seed_data_path=settings.seed_data_path,
        latency=settings.repository_latency,
    )
    return repositories


__all__ = [
    "CharacterStore",
    "DroidRepository",
    "HumanRepository",
    "Repositories",
    "RepositoryError",
    "create_memory_repositories",
    "create_repositories",
    "load_seed_file",
]
