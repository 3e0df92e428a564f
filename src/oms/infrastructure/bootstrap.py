"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from oms.infrastructure.persistence.json_store import JsonUnitOfWork
from oms.infrastructure.security import PasslibPasswordHasher

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def unit_of_work(data_dir: Path | None = None) -> JsonUnitOfWork:
    return JsonUnitOfWork(data_dir or DEFAULT_DATA_DIR)


def password_hasher() -> PasslibPasswordHasher:
    return PasslibPasswordHasher()
