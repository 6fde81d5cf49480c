"""Shared fixtures: in-memory sqlite stores."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from repositories.store import SqlAlchemyVotingStore

SMALL_CATALOG = {
    "Acadia": "/images/parks/acadia.jpg",
    "Yosemite": "/images/parks/yosemite.jpg",
    "Zion": "/images/parks/zion.jpg",
}


@pytest.fixture
def catalog() -> dict[str, str]:
    return dict(SMALL_CATALOG)


@pytest.fixture
def store() -> Iterator[SqlAlchemyVotingStore]:
    voting_store = SqlAlchemyVotingStore.from_url("sqlite://")
    yield voting_store
    voting_store.close()


@pytest.fixture
def seeded_store(store: SqlAlchemyVotingStore) -> SqlAlchemyVotingStore:
    store.seed_catalog(SMALL_CATALOG)
    return store


@pytest.fixture
def park_ids(seeded_store: SqlAlchemyVotingStore) -> dict[str, int]:
    return {item.name: item.id for item in seeded_store.list_items()}
