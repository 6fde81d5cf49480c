"""parks table model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from domain.elo import INITIAL_RATING
from models.base import Base


class Park(Base):
    """One votable park with its current rating and vote counters."""

    __tablename__ = "parks"
    __table_args__ = (
        CheckConstraint("total_votes >= 0", name="ck_parks_total_votes"),
        CheckConstraint("wins + losses = total_votes", name="ck_parks_vote_counters"),
        Index("idx_parks_rating", "elo_rating", "id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    elo_rating: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=INITIAL_RATING,
        server_default=str(INITIAL_RATING),
    )
    total_votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    wins: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    losses: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )
