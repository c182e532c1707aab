"""Storage module."""

from .brain import IBrain, MemoryBrain
from .sqlite_brain import SqliteBrain

__all__ = ["IBrain", "MemoryBrain", "SqliteBrain"]
