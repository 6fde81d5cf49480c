"""Database repository helpers."""

from repositories.park_repository import ensure_voting_schema
from repositories.store import (
    SqlAlchemyVotingStore,
    SqlAlchemyVotingTransaction,
    open_voting_store,
)

__all__ = [
    "SqlAlchemyVotingStore",
    "SqlAlchemyVotingTransaction",
    "ensure_voting_schema",
    "open_voting_store",
]
