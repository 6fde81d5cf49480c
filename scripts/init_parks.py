#!/usr/bin/env python3
"""Create the voting schema and seed parks from the catalog."""

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
from domain.catalog import load_catalog
from domain.config import load_app_config
from repositories.store import open_voting_store
from web.logging_setup import configure_logging

app = typer.Typer(
    add_completion=False,
    help="Park catalog jobs.",
)


@app.command("init")
def init_parks(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="TOML settings file. Defaults to $PARK_VOTING_CONFIG."),
    ] = None,
    db_url: Annotated[
        str | None,
        typer.Option(
            "--db-url",
            help="Database URL. Overrides the environment and the config file.",
        ),
    ] = None,
    catalog_path: Annotated[
        Path | None,
        typer.Option("--catalog", help="JSON catalog of park name -> image URL."),
    ] = None,
) -> None:
    """Create tables if missing and insert parks that are not stored yet."""
    config = load_app_config(config_path)
    configure_logging(config.log_level)
    target_catalog = catalog_path or config.catalog_path
    try:
        catalog = load_catalog(target_catalog)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--catalog") from exc

    store = open_voting_store(resolve_db_url(db_url, fallback=config.database_url))
    try:
        inserted = store.seed_catalog(catalog)
        total = store.count_items()
    finally:
        store.close()

    typer.echo(
        f"completed catalog={target_catalog} "
        f"catalog_size={len(catalog)} "
        f"inserted_parks={inserted} "
        f"total_parks={total}"
    )


if __name__ == "__main__":
    app()
