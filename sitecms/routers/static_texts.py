"""Module F: Static texts. Reads are public, writes need an admin session."""
from fastapi import APIRouter, Depends, HTTPException

from sitecms.dependencies import get_static_texts, require_admin
from sitecms.schemas.common import MessageResponse
from sitecms.schemas.static_text import StaticTextResponse, StaticTextUpdate
from sitecms.services.auth import SessionData
from sitecms.services.static_text import StaticTextStore

router = APIRouter(prefix="/api/static-texts", tags=["static-texts"])


@router.get("", response_model=dict[str, str])
def list_static_texts(texts: StaticTextStore = Depends(get_static_texts)):
    return texts.all()


@router.post("/reload", response_model=MessageResponse)
def reload_static_texts(
    texts: StaticTextStore = Depends(get_static_texts),
    session: SessionData = Depends(require_admin),
):
    count = texts.reload()
    return MessageResponse(message=f"Reloaded {count} static text(s)")


@router.get("/{key}", response_model=StaticTextResponse)
def get_static_text(key: str, texts: StaticTextStore = Depends(get_static_texts)):
    value = texts.get(key)
    if value is None:
        raise HTTPException(status_code=404, detail="Static text not found")
    return StaticTextResponse(key=key, value=value)


@router.put("/{key}", response_model=StaticTextResponse)
def set_static_text(
    key: str,
    data: StaticTextUpdate,
    texts: StaticTextStore = Depends(get_static_texts),
    session: SessionData = Depends(require_admin),
):
    texts.set(key, data.value, session.user_id)
    return StaticTextResponse(key=key, value=data.value)
