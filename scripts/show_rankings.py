#!/usr/bin/env python3
"""Show the top-rated parks."""

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
    help="Query park rankings.",
)


@app.command()
def show_rankings(
    top_n: Annotated[
        int,
        typer.Option("--top-n", help="Number of parks to return."),
    ] = 20,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="TOML settings file. Defaults to $PARK_VOTING_CONFIG."),
    ] = None,
    db_url: Annotated[
        str | None,
        typer.Option("--db-url", help="Database URL. Overrides the environment and the config file."),
    ] = None,
) -> None:
    """Print parks by rating, highest first."""
    if top_n <= 0:
        raise typer.BadParameter("--top-n must be greater than 0")

    config = load_app_config(config_path)
    store = SqlAlchemyVotingStore.from_url(resolve_db_url(db_url, fallback=config.database_url))
    try:
        items = store.list_ranked(top_n)
    finally:
        store.close()

    if not items:
        typer.echo("No parks found. Run init_parks.py first.")
        return

    typer.echo(f"top_n={top_n}")
    for index, item in enumerate(items, start=1):
        typer.echo(
            f"{index:2d}. {item.name:<30} "
            f"elo={item.rating:5d} votes={item.total_votes:4d} "
            f"wins={item.wins:4d} losses={item.losses:4d}"
        )


if __name__ == "__main__":
    app()
