"""JSON-file-backed implementation of UnitOfWork.

All aggregates live in one JSON document so that a transaction touching
several of them (a pull-list line and the item whose stock it moves) can
be persisted with a single atomic file replace.

Isolation: every unit of work on the same file holds a process-wide lock
from ``__enter__`` to ``__exit__``, so concurrent requests are serialized
and a read-modify-write of an item's stock can never be lost. Separate
processes sharing a file are not coordinated.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from pim.domain.repository.unit_of_work import UnitOfWork
from pim.infrastructure.persistence.json_expense_repository import (
    JsonExpenseRepository,
)
from pim.infrastructure.persistence.json_item_repository import JsonItemRepository
from pim.infrastructure.persistence.json_project_item_repository import (
    JsonProjectItemRepository,
)
from pim.infrastructure.persistence.json_project_repository import (
    JsonProjectRepository,
)

logger = logging.getLogger(__name__)

COLLECTIONS = ("items", "projects", "project_items", "expenses")

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path).resolve()
        self._lock = _lock_for(self._file_path)
        self._ensure_file()

    # --- UnitOfWork interface -------------------------------------------------

    def commit(self) -> None:
        self._persist(self._document)
        logger.debug("Committed %s", self._file_path)

    def rollback(self) -> None:
        self._bind(self._load())

    def _begin(self) -> None:
        self._lock.acquire()
        try:
            self._bind(self._load())
        except Exception:
            self._lock.release()
            raise

    def _end(self) -> None:
        self._lock.release()

    # --- Internal helpers -----------------------------------------------------

    def _bind(self, document: dict) -> None:
        self._document = document
        self.items = JsonItemRepository(document["items"])
        self.projects = JsonProjectRepository(document["projects"])
        self.project_items = JsonProjectItemRepository(document["project_items"])
        self.expenses = JsonExpenseRepository(document["expenses"])

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict:
        document = json.loads(self._file_path.read_text(encoding="utf-8"))
        for name in COLLECTIONS:
            document.setdefault(name, [])
        return document

    def _persist(self, document: dict) -> None:
        # Write to a sibling temp file, then swap it in atomically.
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._file_path.name}.", dir=self._file_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(document, indent=2) + "\n")
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._persist({name: [] for name in COLLECTIONS})
