"""JSON shapes returned by the API."""

from __future__ import annotations

from typing import Any

from domain.common import Item, RecentOutcome, RecordedOutcome


def item_to_json(item: Item) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "image_url": item.image_url,
        "elo_rating": item.rating,
        "total_votes": item.total_votes,
        "wins": item.wins,
        "losses": item.losses,
    }


def ranked_item_to_json(item: Item, rank: int) -> dict[str, Any]:
    return {**item_to_json(item), "rank": rank}


def recent_outcome_to_json(outcome: RecentOutcome) -> dict[str, Any]:
    return {
        "id": outcome.id,
        "winner_id": outcome.winner_id,
        "loser_id": outcome.loser_id,
        "timestamp": outcome.timestamp.isoformat(),
        "winner_name": outcome.winner_name,
        "loser_name": outcome.loser_name,
        "winner_image": outcome.winner_image_url,
        "loser_image": outcome.loser_image_url,
    }


def recorded_outcome_to_json(recorded: RecordedOutcome) -> dict[str, Any]:
    return {
        "voteId": recorded.outcome.id,
        "winnerId": recorded.winner_id,
        "loserId": recorded.loser_id,
        "newWinnerRating": recorded.new_winner_rating,
        "newLoserRating": recorded.new_loser_rating,
    }
