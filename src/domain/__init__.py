"""Park voting domain modules."""

from domain.common import EloUpdate, Item, Outcome, RecentOutcome, RecordedOutcome
from domain.engine import RatingUpdateEngine
from domain.errors import (
    InvalidArgumentError,
    InvalidReferenceError,
    NotEnoughItemsError,
    StoreFailureError,
    VotingError,
)
from domain.pairing import PairSelector, choose_pair
from domain.protocol import VotingStore, VotingTransaction

__all__ = [
    "EloUpdate",
    "InvalidArgumentError",
    "InvalidReferenceError",
    "Item",
    "NotEnoughItemsError",
    "Outcome",
    "PairSelector",
    "RatingUpdateEngine",
    "RecentOutcome",
    "RecordedOutcome",
    "StoreFailureError",
    "VotingError",
    "VotingStore",
    "VotingTransaction",
    "choose_pair",
]
