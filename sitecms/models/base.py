"""Shared shape of persisted records: snake_case attributes, camelCase on disk."""
from datetime import datetime, timezone

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Record(BaseModel):
    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_document(self) -> dict:
        """JSON-ready dict with the on-disk field names."""
        return self.model_dump(mode="json", by_alias=True)
