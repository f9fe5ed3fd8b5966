"""
Persisted record models. Field names on disk are the camelCase aliases
(imageUrl, createdAt, ...); Python code uses the snake_case attributes.
"""
from sitecms.models.base import Record, utcnow
from sitecms.models.event import Event
from sitecms.models.content_block import ContentBlock
from sitecms.models.audit_log import AuditLogEntry, UNKNOWN_ACTOR

__all__ = [
    "Record",
    "utcnow",
    "Event",
    "ContentBlock",
    "AuditLogEntry",
    "UNKNOWN_ACTOR",
]
