"""Error taxonomy for voting operations."""

from __future__ import annotations

from collections.abc import Iterable


class VotingError(Exception):
    """Base class for every error raised by the voting domain."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(VotingError):
    """Request arguments are missing, malformed, or contradictory."""


class InvalidReferenceError(VotingError):
    """One or more park ids do not exist."""

    def __init__(self, missing_ids: Iterable[int]) -> None:
        self.missing_ids = tuple(sorted(set(missing_ids)))
        ids = ", ".join(str(item_id) for item_id in self.missing_ids)
        super().__init__(f"Unknown park id(s): {ids}")


class NotEnoughItemsError(VotingError):
    """Fewer than two parks are available to build a pair."""

    def __init__(self, available: int) -> None:
        self.available = available
        super().__init__("Not enough parks available")


class StoreFailureError(VotingError):
    """The store failed and the transaction was rolled back."""


__all__ = [
    "InvalidArgumentError",
    "InvalidReferenceError",
    "NotEnoughItemsError",
    "StoreFailureError",
    "VotingError",
]
