"""
Flat-file record store.

Each named collection lives in <data_dir>/<name>.json as a pretty-printed UTF-8
JSON document: an array of records for events, logs and contentBlocks, an object
for staticTexts. Every save rewrites the whole file (temp file + os.replace), so
the file on disk always matches the last completed save.

Read problems never raise: a corrupt or unreadable file is logged and treated as
an empty collection. Write problems are logged and reported by a False return.
Callers doing read-modify-write hold lock(name) for the whole cycle.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

log = logging.getLogger("uvicorn.error")

EVENTS = "events"
LOGS = "logs"
CONTENT_BLOCKS = "contentBlocks"
STATIC_TEXTS = "staticTexts"

ARRAY_COLLECTIONS = (EVENTS, LOGS, CONTENT_BLOCKS)


class RecordStore:
    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def lock(self, name: str) -> threading.RLock:
        """Per-collection lock; re-entrant so a holder can call load/save freely."""
        with self._locks_guard:
            lk = self._locks.get(name)
            if lk is None:
                lk = self._locks[name] = threading.RLock()
            return lk

    def init_collections(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for name in ARRAY_COLLECTIONS:
            if not self.path_for(name).exists():
                self._write(name, [])

    # -- arrays ---------------------------------------------------------

    def load(self, name: str) -> list[dict[str, Any]]:
        data = self._read(name, [])
        if not isinstance(data, list):
            log.warning("Record store: %s is not a JSON array; treating as empty", self.path_for(name))
            return []
        return data

    def save(self, name: str, records: list[dict[str, Any]]) -> bool:
        return self._write(name, list(records))

    # -- objects --------------------------------------------------------

    def load_mapping(self, name: str) -> dict[str, Any]:
        data = self._read(name, {})
        if not isinstance(data, dict):
            log.warning("Record store: %s is not a JSON object; treating as empty", self.path_for(name))
            return {}
        return data

    def save_mapping(self, name: str, mapping: dict[str, Any]) -> bool:
        return self._write(name, dict(mapping))

    # -- file I/O -------------------------------------------------------

    def _read(self, name: str, empty: list | dict) -> Any:
        path = self.path_for(name)
        with self.lock(name):
            if not path.exists():
                self._write(name, empty)
                return type(empty)()
            try:
                raw = path.read_text(encoding="utf-8")
            except OSError as e:
                log.warning("Record store: cannot read %s (%s); treating as empty", path, e)
                return type(empty)()
            if not raw.strip():
                return type(empty)()
            try:
                return json.loads(raw)
            except ValueError as e:
                log.warning("Record store: corrupt JSON in %s (%s); treating as empty", path, e)
                return type(empty)()

    def _write(self, name: str, data: list | dict) -> bool:
        path = self.path_for(name)
        with self.lock(name):
            tmp_name = None
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(prefix=f".{name}.", suffix=".tmp", dir=path.parent)
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, indent=2, ensure_ascii=False)
                os.replace(tmp_name, path)
                return True
            except (OSError, TypeError, ValueError) as e:
                log.warning("Record store: write to %s dropped (%s)", path, e)
                if tmp_name and os.path.exists(tmp_name):
                    try:
                        os.unlink(tmp_name)
                    except OSError:
                        pass
                return False
