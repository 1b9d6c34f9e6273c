"""
GraphQL type definitions
"""

from .character import Character, Episode
from .droid import Droid
from .human import Human
from .info import Info
from .scalars import Duration

__all__ = ["Character", "Droid", "Duration", "Episode", "Human", "Info"]
