"""Shared domain types for park voting."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

# ids are stored as signed 64-bit integers
MAX_ITEM_ID = 2**63 - 1


def is_storable_item_id(item_id: int) -> bool:
    return 1 <= item_id <= MAX_ITEM_ID


@dataclass(frozen=True)
class Item:
    """Current state of one votable park."""

    id: int
    name: str
    image_url: str
    rating: int
    total_votes: int = 0
    wins: int = 0
    losses: int = 0


@dataclass(frozen=True)
class Outcome:
    """One immutable vote: ``winner_id`` beat ``loser_id``."""

    id: int
    winner_id: int
    loser_id: int
    timestamp: datetime


@dataclass(frozen=True)
class RecentOutcome:
    """Outcome enriched with both parks' display fields."""

    id: int
    winner_id: int
    loser_id: int
    timestamp: datetime
    winner_name: str
    loser_name: str
    winner_image_url: str
    loser_image_url: str


@dataclass(frozen=True)
class EloUpdate:
    """Result of applying one outcome to a winner/loser rating pair."""

    winner_pre_rating: int
    loser_pre_rating: int
    winner_expected: float
    loser_expected: float
    new_winner_rating: int
    new_loser_rating: int

    @property
    def winner_delta(self) -> int:
        return self.new_winner_rating - self.winner_pre_rating

    @property
    def loser_delta(self) -> int:
        return self.new_loser_rating - self.loser_pre_rating


@dataclass(frozen=True)
class RecordedOutcome:
    """A committed vote together with the rating change it caused."""

    outcome: Outcome
    update: EloUpdate

    @property
    def winner_id(self) -> int:
        return self.outcome.winner_id

    @property
    def loser_id(self) -> int:
        return self.outcome.loser_id

    @property
    def new_winner_rating(self) -> int:
        return self.update.new_winner_rating

    @property
    def new_loser_rating(self) -> int:
        return self.update.new_loser_rating
