"""ORM models."""

from models.base import Base
from models.park import INITIAL_RATING, Park
from models.vote import Vote

__all__ = [
    "Base",
    "INITIAL_RATING",
    "Park",
    "Vote",
]
