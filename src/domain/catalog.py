"""Load the static park catalog (name -> image URL)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def load_catalog(path: Path) -> dict[str, str]:
    """Read a JSON object mapping park names to image URLs."""
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    with path.open("r", encoding="utf-8") as file:
        raw = json.load(file)
    return parse_catalog(raw, source=path)


def parse_catalog(raw: Any, *, source: Path | str = "<catalog>") -> dict[str, str]:
    if not isinstance(raw, dict):
        raise ValueError(f"{source}: catalog must be a JSON object of name -> image URL")

    catalog: dict[str, str] = {}
    for name, image_url in raw.items():
        clean_name = str(name).strip()
        if not clean_name:
            raise ValueError(f"{source}: park names cannot be blank")
        if not isinstance(image_url, str):
            raise ValueError(f"{source}: image URL for {clean_name!r} must be a string")
        # first spelling wins when names collide after stripping
        catalog.setdefault(clean_name, image_url)
    return catalog
