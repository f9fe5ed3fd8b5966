"""Append-only audit log service. Never update or delete - immutable audit trail.

Auditing is best-effort: append() logs and swallows every failure so the
operation being recorded always goes through.
"""
from __future__ import annotations

import enum
import logging
import uuid
from datetime import date, datetime
from typing import Any

from sitecms.database import LOGS, RecordStore
from sitecms.models import AuditLogEntry, UNKNOWN_ACTOR, utcnow

log = logging.getLogger("uvicorn.error")

LOGIN_SUCCESS = "login_success"
LOGIN_FAILED = "login_failed"
LOGOUT = "logout"
STATIC_TEXT_UPDATED = "static_text_updated"

DEFAULT_LIMIT = 100
_ACTION_LEN = 64


def _sanitize_meta_value(v: Any) -> Any:
    """Convert to JSON-serializable value so details never break the write."""
    if v is None:
        return None
    if isinstance(v, (str, int, float, bool)):
        return v
    if isinstance(v, (datetime, date)):
        return v.isoformat()
    if isinstance(v, enum.Enum):
        return getattr(v, "value", str(v))
    if isinstance(v, dict):
        return {str(k): _sanitize_meta_value(x) for k, x in v.items()}
    if isinstance(v, (list, tuple)):
        return [_sanitize_meta_value(x) for x in v]
    return str(v)


def _sanitize_details(details: dict[str, Any] | None) -> dict[str, Any]:
    if not details:
        return {}
    try:
        return {str(k): _sanitize_meta_value(v) for k, v in details.items()}
    except Exception:
        return {"_error": "details_serialization"}


class AuditLog:
    def __init__(self, store: RecordStore, max_entries: int = 0, default_limit: int = DEFAULT_LIMIT):
        self._store = store
        self.max_entries = max(0, max_entries)
        self.default_limit = default_limit if default_limit > 0 else DEFAULT_LIMIT

    def append(self, action: str, user_id: str | None, details: dict[str, Any] | None = None) -> AuditLogEntry | None:
        """Append one entry. Returns it, or None if it could not be written."""
        try:
            entry = AuditLogEntry(
                id=str(uuid.uuid4()),
                action=(action or "")[:_ACTION_LEN].strip() or "unknown",
                user_id=str(user_id) if user_id else UNKNOWN_ACTOR,
                details=_sanitize_details(details),
                timestamp=utcnow(),
            )
            with self._store.lock(LOGS):
                entries = self._store.load(LOGS)
                entries.append(entry.to_document())
                if self.max_entries and len(entries) > self.max_entries:
                    entries = entries[-self.max_entries:]
                if not self._store.save(LOGS, entries):
                    log.warning("Audit log: entry %s (%s) was not persisted", entry.id, entry.action)
                    return None
            return entry
        except Exception:
            log.exception("Audit log: append failed for action=%s", action)
            return None

    def recent(self, limit: int | None = None) -> list[AuditLogEntry]:
        """Last `limit` entries, most recent first."""
        if not limit or limit < 1:
            limit = self.default_limit
        out = []
        for doc in reversed(self._store.load(LOGS)[-limit:]):
            try:
                out.append(AuditLogEntry.model_validate(doc))
            except ValueError as e:
                log.warning("Audit log: skipping malformed entry %r (%s)", doc.get("id") if isinstance(doc, dict) else doc, e)
        return out
