"""SQLAlchemy-backed voting store."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from db import create_db_engine, create_session_factory
from domain.common import Item, Outcome, RecentOutcome, is_storable_item_id
from domain.errors import InvalidArgumentError, StoreFailureError
from repositories.park_repository import (
    apply_park_result,
    count_parks,
    ensure_voting_schema,
    fetch_park,
    fetch_parks_for_update,
    fetch_ranked_parks,
    insert_missing_parks,
)
from repositories.vote_repository import fetch_recent_votes, insert_vote

logger = logging.getLogger(__name__)


class SqlAlchemyVotingTransaction:
    """Transaction-scoped view of the store handed to the rating engine."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def lock_items(self, item_ids: Iterable[int]) -> dict[int, Item]:
        return fetch_parks_for_update(self.session, item_ids)

    def apply_result(self, item_id: int, new_rating: int, *, won: bool) -> None:
        apply_park_result(self.session, item_id, new_rating, won=won)

    def insert_outcome(self, winner_id: int, loser_id: int) -> Outcome:
        return insert_vote(self.session, winner_id=winner_id, loser_id=loser_id)


class SqlAlchemyVotingStore:
    """Parks table and vote log behind one engine.

    Construct it explicitly, call ``ensure_schema`` (and usually
    ``seed_catalog``) once, and ``close`` it on shutdown.
    """

    def __init__(self, engine: Engine, session_factory: sessionmaker[Session] | None = None) -> None:
        self.engine = engine
        self.session_factory = session_factory or create_session_factory(engine)

    @classmethod
    def from_url(cls, db_url: str, *, create_schema: bool = True) -> SqlAlchemyVotingStore:
        store = cls(create_db_engine(db_url))
        if create_schema:
            store.ensure_schema()
        return store

    def ensure_schema(self) -> None:
        try:
            ensure_voting_schema(self.engine)
        except SQLAlchemyError as exc:
            raise StoreFailureError("Failed to create voting schema") from exc

    def close(self) -> None:
        self.engine.dispose()

    @contextmanager
    def transaction(self) -> Iterator[SqlAlchemyVotingTransaction]:
        """Yield a transaction that commits on success and rolls back on any error."""
        with self.session_factory() as session:
            try:
                with session.begin():
                    yield SqlAlchemyVotingTransaction(session)
            except SQLAlchemyError as exc:
                logger.error("Voting transaction rolled back: %s", exc)
                raise StoreFailureError("Store transaction failed") from exc

    @contextmanager
    def _read_session(self) -> Iterator[Session]:
        with self.session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as exc:
                raise StoreFailureError("Store read failed") from exc

    def list_items(self) -> list[Item]:
        with self._read_session() as session:
            return fetch_ranked_parks(session)

    def list_ranked(self, limit: int | None = None) -> list[Item]:
        if limit is not None and limit <= 0:
            raise InvalidArgumentError(f"limit must be a positive integer, got {limit}")
        with self._read_session() as session:
            return fetch_ranked_parks(session, limit=limit)

    def list_recent_outcomes(self, limit: int = 10) -> list[RecentOutcome]:
        if limit <= 0:
            raise InvalidArgumentError(f"limit must be a positive integer, got {limit}")
        with self._read_session() as session:
            return fetch_recent_votes(session, limit=limit)

    def get_item(self, item_id: int) -> Item | None:
        if not is_storable_item_id(item_id):
            return None
        with self._read_session() as session:
            return fetch_park(session, item_id)

    def count_items(self) -> int:
        with self._read_session() as session:
            return count_parks(session)

    def seed_catalog(self, catalog: Mapping[str, str]) -> int:
        """Insert parks missing from the table; returns how many were added."""
        with self.transaction() as transaction:
            inserted = insert_missing_parks(transaction.session, catalog)
        logger.info("Seeded parks inserted=%d catalog_size=%d", inserted, len(catalog))
        return inserted


def open_voting_store(
    db_url: str,
    *,
    catalog: Mapping[str, str] | None = None,
) -> SqlAlchemyVotingStore:
    """Open the store, create the schema, and seed the catalog when given."""
    store = SqlAlchemyVotingStore.from_url(db_url)
    if catalog is not None:
        store.seed_catalog(catalog)
    return store
