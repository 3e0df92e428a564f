"""JSON-file-backed implementation of UnitOfWork.

The whole store is one JSON document with a section per aggregate::

    {"products": [...], "users": [...], "orders": [...],
     "sequences": {"products": 3, "users": 2, "orders": 5}}

Repositories read and write an in-memory copy of the document.
``commit()`` writes it to a temporary file and renames it over the old
one, so readers see either every write of a unit of work or none.  An
exclusive ``flock`` on a sibling lock file is held for the lifetime of
the unit of work; it serializes threads and processes alike.
"""

from __future__ import annotations

import fcntl
import json
import os
from pathlib import Path
from typing import IO

from oms.domain.repository.unit_of_work import UnitOfWork
from oms.infrastructure.persistence.json_order_repository import JsonOrderRepository
from oms.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from oms.infrastructure.persistence.json_user_repository import JsonUserRepository

STORE_FILE = "store.json"
LOCK_FILE = "store.lock"
SECTIONS = ("products", "users", "orders")


class JsonUnitOfWork(UnitOfWork):
    """Not reentrant: use one instance per thread."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._store_path = data_dir / STORE_FILE
        self._lock_path = data_dir / LOCK_FILE
        self._lock_file: IO[str] | None = None
        self._document: dict = {}

    # --- UnitOfWork interface ----------------------------------------------

    def commit(self) -> None:
        self._assert_active()
        self._persist(self._document)

    def rollback(self) -> None:
        self._assert_active()
        self._load()

    def _begin(self) -> None:
        if self._lock_file is not None:
            raise RuntimeError("Unit of work is already active")
        self._data_dir.mkdir(parents=True, exist_ok=True)
        lock_file = open(self._lock_path, "a", encoding="utf-8")
        try:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            self._lock_file = lock_file
            self._load()
        except BaseException:
            self._lock_file = None
            lock_file.close()
            raise

    def _end(self) -> None:
        lock_file, self._lock_file = self._lock_file, None
        if lock_file is not None:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)
            lock_file.close()

    # --- Document helpers ---------------------------------------------------

    def _load(self) -> None:
        self._document = self._read()
        sequences = self._document["sequences"]
        self.products = JsonProductRepository(self._document["products"], sequences)
        self.users = JsonUserRepository(self._document["users"], sequences)
        self.orders = JsonOrderRepository(self._document["orders"], sequences)

    def _read(self) -> dict:
        document: dict = {}
        if self._store_path.exists():
            document = json.loads(self._store_path.read_text(encoding="utf-8"))
        for name in SECTIONS:
            document.setdefault(name, [])
        document.setdefault("sequences", {})
        return document

    def _persist(self, document: dict) -> None:
        tmp_path = self._store_path.with_name(STORE_FILE + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as fh:
            fh.write(json.dumps(document, indent=2) + "\n")
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_path, self._store_path)

    def _assert_active(self) -> None:
        if self._lock_file is None:
            raise RuntimeError("Unit of work is not active")
