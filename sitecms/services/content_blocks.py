"""Module C: Content block repository."""
from typing import Any

from sitecms.database import CONTENT_BLOCKS
from sitecms.models import ContentBlock
from sitecms.services.repository import Repository


class ContentBlockRepository(Repository[ContentBlock]):
    collection = CONTENT_BLOCKS
    model = ContentBlock
    entity = "content_block"
    defaults = {"position": 0}

    def audit_details(self, record: ContentBlock) -> dict[str, Any]:
        return {"blockId": record.id, "page": record.page}

    def list_by_page(self, page: str) -> list[ContentBlock]:
        """Blocks of one page in display order (position, then insertion order)."""
        blocks = self.list(lambda b: b.page == page)
        return sorted(blocks, key=lambda b: b.position)
