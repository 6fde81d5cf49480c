"""Elo rating modules."""

from domain.elo.calculator import (
    DEFAULT_PARAMETERS,
    INITIAL_RATING,
    K_FACTOR,
    SCALE_FACTOR,
    EloParameters,
    calculate_elo_update,
    calculate_expected_score,
    round_rating,
)

__all__ = [
    "DEFAULT_PARAMETERS",
    "INITIAL_RATING",
    "K_FACTOR",
    "SCALE_FACTOR",
    "EloParameters",
    "calculate_elo_update",
    "calculate_expected_score",
    "round_rating",
]
