"""Module C: Editable page content blocks."""
from sitecms.models.base import Record


class ContentBlock(Record):
    page: str
    text: str
    image_url: str | None = None
    alt_text: str | None = None
    # Display order within a page; not unique
    position: int = 0
