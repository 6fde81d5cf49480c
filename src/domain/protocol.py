"""Storage contracts the voting domain depends on."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable

from domain.common import Item, Outcome, RecentOutcome


@runtime_checkable
class VotingTransaction(Protocol):
    """Operations that must run inside one store transaction."""

    def lock_items(self, item_ids: Iterable[int]) -> dict[int, Item]: ...

    def apply_result(self, item_id: int, new_rating: int, *, won: bool) -> None: ...

    def insert_outcome(self, winner_id: int, loser_id: int) -> Outcome: ...


@runtime_checkable
class VotingStore(Protocol):
    """Durable park table plus the append-only vote log."""

    def transaction(self) -> AbstractContextManager[VotingTransaction]: ...

    def list_items(self) -> list[Item]: ...

    def list_ranked(self, limit: int | None = None) -> list[Item]: ...

    def list_recent_outcomes(self, limit: int = 10) -> list[RecentOutcome]: ...

    def get_item(self, item_id: int) -> Item | None: ...

    def count_items(self) -> int: ...

    def seed_catalog(self, catalog: Mapping[str, str]) -> int: ...


__all__ = ["VotingStore", "VotingTransaction"]
