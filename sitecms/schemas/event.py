"""Module B: Event schemas."""
from pydantic import field_validator

from sitecms.schemas.common import CamelModel


class EventCreate(CamelModel):
    # Empty defaults so the router can answer 400 (not 422) for missing title/date
    title: str = ""
    description: str | None = None
    date: str = ""
    location: str | None = None
    image_url: str | None = None


class EventUpdate(CamelModel):
    title: str | None = None
    description: str | None = None
    date: str | None = None
    location: str | None = None
    image_url: str | None = None
    archived: bool | None = None

    @field_validator("title", "date", "archived")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v
