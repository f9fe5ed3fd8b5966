"""
Module F: Static text store.

Key -> string mapping feeding page placeholders. Loaded (or created empty) at
startup, rewritten in full on every set, and reloaded wholesale when the file
is edited out-of-band. Readers always see a complete mapping: writers build a
new dict and swap the reference under the lock.
"""
from __future__ import annotations

import logging
import threading

from sitecms.database import STATIC_TEXTS, RecordStore
from sitecms.services.audit_log import STATIC_TEXT_UPDATED, AuditLog

log = logging.getLogger("uvicorn.error")

PREVIEW_LEN = 100


class StaticTextStore:
    def __init__(self, store: RecordStore, audit: AuditLog):
        self._store = store
        self._audit = audit
        self._texts: dict[str, str] = {}
        self._lock = threading.Lock()

    @property
    def path(self):
        return self._store.path_for(STATIC_TEXTS)

    def load(self) -> int:
        """Load-or-create the backing file. Returns the number of keys."""
        return self.reload()

    def reload(self) -> int:
        mapping = {str(k): str(v) for k, v in self._store.load_mapping(STATIC_TEXTS).items() if v is not None}
        with self._lock:
            self._texts = mapping
        log.info("Static texts loaded: %d key(s) from %s", len(mapping), self.path)
        return len(mapping)

    def get(self, key: str) -> str | None:
        return self._texts.get(key)

    def all(self) -> dict[str, str]:
        return dict(self._texts)

    def set(self, key: str, value: str, actor_id: str | None) -> None:
        with self._store.lock(STATIC_TEXTS), self._lock:
            texts = {**self._texts, key: value}
            self._store.save_mapping(STATIC_TEXTS, texts)
            self._texts = texts
        self._audit.append(STATIC_TEXT_UPDATED, actor_id, {"key": key, "preview": value[:PREVIEW_LEN]})
