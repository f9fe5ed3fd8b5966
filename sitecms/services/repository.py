"""
Generic CRUD over one Record Store collection.

Every mutation is a load -> mutate -> save cycle under the collection lock,
followed by an audit entry tagged with the acting user. Unknown ids are
reported as None, never raised.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Callable, Generic, TypeVar

from pydantic import ValidationError

from sitecms.database import RecordStore
from sitecms.models import Record, utcnow
from sitecms.services.audit_log import AuditLog

log = logging.getLogger("uvicorn.error")

T = TypeVar("T", bound=Record)

# Fields a caller may never overwrite through update()
_PROTECTED = ("id", "createdAt")


class Repository(Generic[T]):
    collection: str
    model: type[T]
    # Audit action prefix: "<entity>_created", "<entity>_updated", ...
    entity: str
    defaults: dict[str, Any] = {}

    def __init__(self, store: RecordStore, audit: AuditLog):
        self._store = store
        self._audit = audit

    def audit_details(self, record: T) -> dict[str, Any]:
        return {"id": record.id}

    # -- reads ----------------------------------------------------------

    def list(self, predicate: Callable[[T], bool] | None = None) -> list[T]:
        out = []
        for doc in self._store.load(self.collection):
            record = self._parse(doc)
            if record is not None and (predicate is None or predicate(record)):
                out.append(record)
        return out

    def get(self, record_id: str) -> T | None:
        for doc in self._store.load(self.collection):
            if isinstance(doc, dict) and doc.get("id") == record_id:
                return self._parse(doc)
        return None

    # -- writes ---------------------------------------------------------

    def create(self, data: dict[str, Any], actor_id: str | None) -> T:
        now = utcnow()
        record = self.model.model_validate(
            {
                **self.defaults,
                **data,
                "id": str(uuid.uuid4()),
                "createdAt": now,
                "updatedAt": now,
            }
        )
        with self._store.lock(self.collection):
            docs = self._store.load(self.collection)
            docs.append(record.to_document())
            self._store.save(self.collection, docs)
        self._audit.append(f"{self.entity}_created", actor_id, self.audit_details(record))
        return record

    def update(self, record_id: str, changes: dict[str, Any], actor_id: str | None, action: str | None = None) -> T | None:
        """Shallow overlay of `changes` (on-disk field names); omitted fields keep their value."""
        changes = {k: v for k, v in changes.items() if k not in _PROTECTED}
        with self._store.lock(self.collection):
            docs = self._store.load(self.collection)
            index = self._index_of(docs, record_id)
            # Records that fail validation are invisible to get(), so they are not found here either
            if index is None or self._parse(docs[index]) is None:
                return None
            merged = {**docs[index], **changes, "updatedAt": utcnow()}
            record = self._parse(merged)
            if record is None:
                return None
            docs[index] = {**merged, **record.to_document()}
            self._store.save(self.collection, docs)
        self._audit.append(action or f"{self.entity}_updated", actor_id, self.audit_details(record))
        return record

    def delete(self, record_id: str, actor_id: str | None) -> T | None:
        """Remove the record. Returns what was removed, or None for an unknown or unreadable id (file untouched)."""
        with self._store.lock(self.collection):
            docs = self._store.load(self.collection)
            index = self._index_of(docs, record_id)
            removed = self._parse(docs[index]) if index is not None else None
            if removed is None:
                return None
            remaining = [d for d in docs if not (isinstance(d, dict) and d.get("id") == record_id)]
            self._store.save(self.collection, remaining)
        self._audit.append(f"{self.entity}_deleted", actor_id, self.audit_details(removed))
        return removed

    # -- helpers --------------------------------------------------------

    @staticmethod
    def _index_of(docs: list[dict[str, Any]], record_id: str) -> int | None:
        for i, doc in enumerate(docs):
            if isinstance(doc, dict) and doc.get("id") == record_id:
                return i
        return None

    def _parse(self, doc: Any) -> T | None:
        try:
            return self.model.model_validate(doc)
        except ValidationError as e:
            rid = doc.get("id") if isinstance(doc, dict) else None
            log.warning("%s: skipping malformed record %r (%s)", self.collection, rid, e.error_count())
            return None
