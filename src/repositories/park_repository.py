"""Persistence helpers for the parks table using SQLAlchemy."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from sqlalchemy import func, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from domain.common import Item
from domain.errors import StoreFailureError
from models import Base, Park, Vote


def ensure_voting_schema(engine: Engine) -> None:
    """Create the parks and votes tables and their indexes if they do not exist."""
    Base.metadata.create_all(bind=engine, tables=[Park.__table__, Vote.__table__])


def to_item(park: Park) -> Item:
    return Item(
        id=park.id,
        name=park.name,
        image_url=park.image_url,
        rating=park.elo_rating,
        total_votes=park.total_votes,
        wins=park.wins,
        losses=park.losses,
    )


def fetch_park(session: Session, park_id: int) -> Item | None:
    park = session.get(Park, park_id)
    return None if park is None else to_item(park)


def fetch_parks_for_update(session: Session, park_ids: Iterable[int]) -> dict[int, Item]:
    """Read parks by id with row locks, always locking in id order."""
    statement = (
        select(Park)
        .where(Park.id.in_(sorted(set(park_ids))))
        .order_by(Park.id)
        .with_for_update()
    )
    parks = session.execute(statement).scalars().all()
    return {park.id: to_item(park) for park in parks}


def fetch_ranked_parks(session: Session, *, limit: int | None = None) -> list[Item]:
    """Parks by rating descending; equal ratings fall back to id ascending."""
    statement = select(Park).order_by(Park.elo_rating.desc(), Park.id.asc())
    if limit is not None:
        statement = statement.limit(limit)
    return [to_item(park) for park in session.execute(statement).scalars().all()]


def count_parks(session: Session) -> int:
    result = session.scalar(select(func.count(Park.id)))
    return int(result or 0)


def apply_park_result(session: Session, park_id: int, new_rating: int, *, won: bool) -> None:
    """Overwrite one park's rating and bump its vote counters."""
    counter = Park.wins if won else Park.losses
    statement = (
        update(Park)
        .where(Park.id == park_id)
        .values(
            {
                Park.elo_rating: new_rating,
                Park.total_votes: Park.total_votes + 1,
                counter: counter + 1,
            }
        )
        .execution_options(synchronize_session=False)
    )
    result = session.execute(statement)
    if result.rowcount != 1:
        raise StoreFailureError(f"park_id={park_id} disappeared during rating update")


def insert_missing_parks(session: Session, catalog: Mapping[str, str]) -> int:
    """Insert catalog entries whose names are not stored yet; never overwrite."""
    if not catalog:
        return 0

    existing = set(session.execute(select(Park.name)).scalars().all())
    payload = [
        {"name": name, "image_url": image_url}
        for name, image_url in catalog.items()
        if name not in existing
    ]
    if payload:
        session.execute(insert(Park), payload)
    return len(payload)
