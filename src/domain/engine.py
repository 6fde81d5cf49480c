"""Rating Update Engine: turns one vote into an atomic rating transition."""

from __future__ import annotations

import logging
from typing import Any

from domain.common import RecordedOutcome, is_storable_item_id
from domain.elo import DEFAULT_PARAMETERS, EloParameters, calculate_elo_update
from domain.errors import InvalidArgumentError, InvalidReferenceError
from domain.protocol import VotingStore

logger = logging.getLogger(__name__)


def validate_item_id(value: Any, field: str) -> int:
    """Return ``value`` as a park id or raise ``InvalidArgumentError``."""
    if value is None:
        raise InvalidArgumentError(f"{field} is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{field} must be an integer, got {value!r}")
    return value


class RatingUpdateEngine:
    """Records outcomes against a store, one transaction per vote."""

    def __init__(self, store: VotingStore, params: EloParameters = DEFAULT_PARAMETERS) -> None:
        self.store = store
        self.params = params

    def record_outcome(self, winner_id: int, loser_id: int) -> RecordedOutcome:
        winner_id = validate_item_id(winner_id, "winnerId")
        loser_id = validate_item_id(loser_id, "loserId")
        if winner_id == loser_id:
            raise InvalidArgumentError("Winner and loser cannot be the same park")

        unstorable = [
            item_id for item_id in (winner_id, loser_id) if not is_storable_item_id(item_id)
        ]
        if unstorable:
            raise InvalidReferenceError(unstorable)

        with self.store.transaction() as transaction:
            items = transaction.lock_items((winner_id, loser_id))
            missing = [item_id for item_id in (winner_id, loser_id) if item_id not in items]
            if missing:
                raise InvalidReferenceError(missing)

            update = calculate_elo_update(
                items[winner_id].rating,
                items[loser_id].rating,
                self.params,
            )
            transaction.apply_result(winner_id, update.new_winner_rating, won=True)
            transaction.apply_result(loser_id, update.new_loser_rating, won=False)
            outcome = transaction.insert_outcome(winner_id, loser_id)

        logger.info(
            "vote_id=%s winner_id=%s %s->%s loser_id=%s %s->%s",
            outcome.id,
            winner_id,
            update.winner_pre_rating,
            update.new_winner_rating,
            loser_id,
            update.loser_pre_rating,
            update.new_loser_rating,
        )
        return RecordedOutcome(outcome=outcome, update=update)
