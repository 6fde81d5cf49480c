"""Persistence helpers for the append-only votes table."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, aliased

from domain.common import Outcome, RecentOutcome
from models import Park, Vote


def insert_vote(session: Session, *, winner_id: int, loser_id: int) -> Outcome:
    """Append one vote and return it with its store-assigned id and timestamp."""
    vote = Vote(winner_id=winner_id, loser_id=loser_id)
    session.add(vote)
    session.flush()
    session.refresh(vote)
    return Outcome(
        id=vote.id,
        winner_id=vote.winner_id,
        loser_id=vote.loser_id,
        timestamp=vote.timestamp,
    )


def fetch_recent_votes(session: Session, *, limit: int) -> list[RecentOutcome]:
    """Most recent votes first, joined with both parks' display fields."""
    winner = aliased(Park, name="winner")
    loser = aliased(Park, name="loser")

    statement = (
        select(
            Vote.id,
            Vote.winner_id,
            Vote.loser_id,
            Vote.timestamp,
            winner.name.label("winner_name"),
            loser.name.label("loser_name"),
            winner.image_url.label("winner_image_url"),
            loser.image_url.label("loser_image_url"),
        )
        .join(winner, Vote.winner_id == winner.id)
        .join(loser, Vote.loser_id == loser.id)
        .order_by(Vote.timestamp.desc(), Vote.id.desc())
        .limit(limit)
    )

    rows = session.execute(statement).mappings().all()
    return [
        RecentOutcome(
            id=row["id"],
            winner_id=row["winner_id"],
            loser_id=row["loser_id"],
            timestamp=row["timestamp"],
            winner_name=row["winner_name"],
            loser_name=row["loser_name"],
            winner_image_url=row["winner_image_url"],
            loser_image_url=row["loser_image_url"],
        )
        for row in rows
    ]
