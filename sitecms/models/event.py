"""Module B: Events. archived splits the collection into active and archived views."""
from sitecms.models.base import Record


class Event(Record):
    title: str
    description: str | None = None
    date: str
    location: str | None = None
    image_url: str | None = None
    archived: bool = False
