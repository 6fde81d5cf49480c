"""Pairwise Elo update used for park votes."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from domain.common import EloUpdate

INITIAL_RATING = 1200
K_FACTOR = 32.0
SCALE_FACTOR = 400.0


@dataclass(frozen=True)
class EloParameters:
    k_factor: float = K_FACTOR
    scale_factor: float = SCALE_FACTOR


DEFAULT_PARAMETERS = EloParameters()


def calculate_expected_score(rating: float, opponent_rating: float, scale_factor: float) -> float:
    """Compute the Elo expected score for one side."""
    return 1.0 / (1.0 + 10.0 ** ((opponent_rating - rating) / scale_factor))


def round_rating(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def calculate_elo_update(
    winner_rating: int,
    loser_rating: int,
    params: EloParameters = DEFAULT_PARAMETERS,
) -> EloUpdate:
    """Apply one win of ``winner_rating`` over ``loser_rating``.

    Both expected scores are computed independently (they always sum to 1)
    and each new rating is rounded on its own, so the exchange is zero-sum
    only up to rounding.
    """
    winner_expected = calculate_expected_score(
        rating=winner_rating,
        opponent_rating=loser_rating,
        scale_factor=params.scale_factor,
    )
    loser_expected = calculate_expected_score(
        rating=loser_rating,
        opponent_rating=winner_rating,
        scale_factor=params.scale_factor,
    )

    new_winner_rating = round_rating(winner_rating + params.k_factor * (1.0 - winner_expected))
    new_loser_rating = round_rating(loser_rating + params.k_factor * (0.0 - loser_expected))

    return EloUpdate(
        winner_pre_rating=winner_rating,
        loser_pre_rating=loser_rating,
        winner_expected=winner_expected,
        loser_expected=loser_expected,
        new_winner_rating=new_winner_rating,
        new_loser_rating=new_loser_rating,
    )
