"""Uniform random pair selection."""

from __future__ import annotations

import random
from collections.abc import Sequence

from domain.common import Item
from domain.errors import NotEnoughItemsError
from domain.protocol import VotingStore


def choose_pair(items: Sequence[Item], rng: random.Random) -> tuple[Item, Item]:
    """Pick two distinct items uniformly at random, without replacement."""
    if len(items) < 2:
        raise NotEnoughItemsError(available=len(items))
    first, second = rng.sample(list(items), 2)
    return first, second


class PairSelector:
    """Reads the current catalog and picks the next matchup."""

    def __init__(self, store: VotingStore, rng: random.Random | None = None) -> None:
        self.store = store
        self.rng = rng or random.Random()

    def select_pair(self) -> tuple[Item, Item]:
        return choose_pair(self.store.list_items(), self.rng)
