"""
Holocron
GraphQL query-resolution layer over the droid and human character graph
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
