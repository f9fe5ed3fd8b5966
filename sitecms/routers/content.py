"""Module C: Content blocks. Page reads are public; the full listing and writes are admin-only."""
from fastapi import APIRouter, Depends, HTTPException

from sitecms.dependencies import get_content_blocks, require_admin
from sitecms.models import ContentBlock
from sitecms.schemas.common import MessageResponse
from sitecms.schemas.content_block import ContentBlockCreate, ContentBlockUpdate
from sitecms.services.auth import SessionData
from sitecms.services.content_blocks import ContentBlockRepository

router = APIRouter(prefix="/api/content", tags=["content"])


@router.get("/page/{page}", response_model=list[ContentBlock])
def list_page_blocks(page: str, blocks: ContentBlockRepository = Depends(get_content_blocks)):
    return blocks.list_by_page(page)


@router.get("", response_model=list[ContentBlock])
def list_blocks(
    blocks: ContentBlockRepository = Depends(get_content_blocks),
    session: SessionData = Depends(require_admin),
):
    return blocks.list()


@router.post("", response_model=ContentBlock, status_code=201)
def create_block(
    data: ContentBlockCreate,
    blocks: ContentBlockRepository = Depends(get_content_blocks),
    session: SessionData = Depends(require_admin),
):
    if not data.page or not data.text:
        raise HTTPException(status_code=400, detail="Page and text are required")
    return blocks.create(data.model_dump(by_alias=True, exclude_none=True), session.user_id)


@router.put("/{block_id}", response_model=ContentBlock)
def update_block(
    block_id: str,
    data: ContentBlockUpdate,
    blocks: ContentBlockRepository = Depends(get_content_blocks),
    session: SessionData = Depends(require_admin),
):
    block = blocks.update(block_id, data.model_dump(by_alias=True, exclude_unset=True), session.user_id)
    if not block:
        raise HTTPException(status_code=404, detail="Content block not found")
    return block


@router.delete("/{block_id}", response_model=MessageResponse)
def delete_block(
    block_id: str,
    blocks: ContentBlockRepository = Depends(get_content_blocks),
    session: SessionData = Depends(require_admin),
):
    if not blocks.delete(block_id, session.user_id):
        raise HTTPException(status_code=404, detail="Content block not found")
    return MessageResponse(message="Content block deleted")
