#!/usr/bin/env python3
"""Show the latest recorded votes."""

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
from repositories.store import SqlAlchemyVotingStore

app = typer.Typer(
    add_completion=False,
    help="Query the vote log.",
)


@app.command()
def show_recent_votes(
    limit: Annotated[
        int | None,
        typer.Option("--limit", help="Number of votes to return. Defaults to the config value."),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="TOML settings file. Defaults to $PARK_VOTING_CONFIG."),
    ] = None,
    db_url: Annotated[
        str | None,
        typer.Option("--db-url", help="Database URL. Overrides the environment and the config file."),
    ] = None,
) -> None:
    """Print votes, most recent first."""
    if limit is not None and limit <= 0:
        raise typer.BadParameter("--limit must be greater than 0")

    config = load_app_config(config_path)
    store = SqlAlchemyVotingStore.from_url(resolve_db_url(db_url, fallback=config.database_url))
    try:
        outcomes = store.list_recent_outcomes(limit or config.recent_votes_limit)
    finally:
        store.close()

    if not outcomes:
        typer.echo("No votes recorded yet.")
        return

    for outcome in outcomes:
        typer.echo(
            f"{outcome.timestamp:%Y-%m-%d %H:%M:%S} "
            f"{outcome.winner_name} beat {outcome.loser_name} (vote_id={outcome.id})"
        )


if __name__ == "__main__":
    app()
