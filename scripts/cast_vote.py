#!/usr/bin/env python3
"""Record one vote from the command line."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import resolve_db_url
from domain.config import load_app_config
from domain.engine import RatingUpdateEngine
from domain.errors import VotingError
from repositories.store import SqlAlchemyVotingStore

app = typer.Typer(
    add_completion=False,
    help="Record park votes.",
)


@app.command()
def cast_vote(
    winner_id: Annotated[int, typer.Argument(help="Id of the preferred park.")],
    loser_id: Annotated[int, typer.Argument(help="Id of the other park.")],
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="TOML settings file. Defaults to $PARK_VOTING_CONFIG."),
    ] = None,
    db_url: Annotated[
        str | None,
        typer.Option("--db-url", help="Database URL. Overrides the environment and the config file."),
    ] = None,
) -> None:
    """Apply one win of WINNER_ID over LOSER_ID."""
    config = load_app_config(config_path)
    store = SqlAlchemyVotingStore.from_url(resolve_db_url(db_url, fallback=config.database_url))
    try:
        recorded = RatingUpdateEngine(store).record_outcome(winner_id, loser_id)
    except VotingError as exc:
        typer.echo(f"error: {exc.message}", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        store.close()

    update = recorded.update
    typer.echo(
        f"vote_id={recorded.outcome.id} "
        f"winner_id={recorded.winner_id} elo={update.winner_pre_rating}->{update.new_winner_rating} "
        f"loser_id={recorded.loser_id} elo={update.loser_pre_rating}->{update.new_loser_rating}"
    )


if __name__ == "__main__":
    app()
