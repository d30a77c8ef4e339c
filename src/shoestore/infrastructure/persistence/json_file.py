"""A JSON array on disk, shared by the file-backed repositories."""

from __future__ import annotations

import json
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


class JsonFile:
    """Reads and writes one list of records.

    ``transaction()`` holds a per-file lock across a read-modify-write cycle
    so concurrent requests in one process do not lose each other's writes.
    """

    _locks: dict[Path, threading.RLock] = {}
    _locks_guard = threading.Lock()

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        with JsonFile._locks_guard:
            self._lock = JsonFile._locks.setdefault(file_path.resolve(), threading.RLock())
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        with self._lock:
            return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        with self._lock:
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )

    @contextmanager
    def transaction(self) -> Iterator[list[dict]]:
        """Yield the records; whatever the block leaves in the list is written back."""
        with self._lock:
            records = self.load()
            yield records
            self.persist(records)

    @staticmethod
    def next_id(records: list[dict], key: str = "id") -> int:
        return max((r[key] for r in records), default=0) + 1

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
