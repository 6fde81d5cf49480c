#!/usr/bin/env python3
"""Run the park voting JSON API."""

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
from web import configure_logging, create_app

app = typer.Typer(
    add_completion=False,
    help="Serve the park voting API.",
)


@app.command()
def serve(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="TOML settings file. Defaults to $PARK_VOTING_CONFIG."),
    ] = None,
    db_url: Annotated[
        str | None,
        typer.Option("--db-url", help="Database URL. Overrides the environment and the config file."),
    ] = None,
    host: Annotated[str | None, typer.Option("--host")] = None,
    port: Annotated[int | None, typer.Option("--port")] = None,
    seed: Annotated[
        bool,
        typer.Option("--seed/--no-seed", help="Seed missing parks from the catalog on startup."),
    ] = True,
    debug: Annotated[bool, typer.Option("--debug")] = False,
) -> None:
    """Open the store, seed it once, and serve requests until interrupted."""
    config = load_app_config(config_path)
    if port is not None and (port <= 0 or port > 65535):
        raise typer.BadParameter("--port must be between 1 and 65535")

    configure_logging(config.log_level)
    catalog = load_catalog(config.catalog_path) if seed else None
    store = open_voting_store(
        resolve_db_url(db_url, fallback=config.database_url),
        catalog=catalog,
    )
    bind_host = host or config.host
    bind_port = port or config.port
    try:
        api = create_app(store, config)
        typer.echo(f"serving parks={store.count_items()} on http://{bind_host}:{bind_port}")
        api.run(host=bind_host, port=bind_port, debug=debug)
    finally:
        store.close()


if __name__ == "__main__":
    app()
