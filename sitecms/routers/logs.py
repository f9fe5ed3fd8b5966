"""Module D: Audit log (admin only)."""
import re

from fastapi import APIRouter, Depends, Query

from sitecms.dependencies import get_audit_log, require_admin
from sitecms.models import AuditLogEntry
from sitecms.services.audit_log import AuditLog
from sitecms.services.auth import SessionData

router = APIRouter(prefix="/api/logs", tags=["logs"])

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_limit(raw: str | None) -> int | None:
    """Leading integer of the query value ("10abc" -> 10); None when there is none."""
    m = _LEADING_INT.match(raw or "")
    return int(m.group(1)) if m else None


@router.get("", response_model=list[AuditLogEntry])
def list_logs(
    limit: str | None = Query(None, description="Most recent N entries (default 100)"),
    audit: AuditLog = Depends(get_audit_log),
    session: SessionData = Depends(require_admin),
):
    return audit.recent(_parse_limit(limit))
