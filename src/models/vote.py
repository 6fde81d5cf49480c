"""votes table model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class Vote(Base):
    """Append-only record of one park beating another."""

    __tablename__ = "votes"
    __table_args__ = (
        CheckConstraint("winner_id <> loser_id", name="ck_votes_distinct_parks"),
        Index("idx_votes_timestamp", "timestamp", "id"),
        Index("idx_votes_winner", "winner_id"),
        Index("idx_votes_loser", "loser_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    winner_id: Mapped[int] = mapped_column(ForeignKey("parks.id"), nullable=False)
    loser_id: Mapped[int] = mapped_column(ForeignKey("parks.id"), nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )
