"""Append-only audit log entry. Never updated or deleted once written."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

UNKNOWN_ACTOR = "unknown"


class AuditLogEntry(BaseModel):
    id: str
    action: str
    user_id: str = UNKNOWN_ACTOR
    details: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_document(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
