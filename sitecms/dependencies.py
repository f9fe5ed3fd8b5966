"""Shared dependencies: app components, current session, admin gate."""
from fastapi import Depends, HTTPException, Request

from sitecms.config import Settings
from sitecms.services.audit_log import AuditLog
from sitecms.services.auth import AdminAccount, SessionData, SessionStore
from sitecms.services.content_blocks import ContentBlockRepository
from sitecms.services.events import EventRepository
from sitecms.services.static_text import StaticTextStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_audit_log(request: Request) -> AuditLog:
    return request.app.state.audit_log


def get_events(request: Request) -> EventRepository:
    return request.app.state.events


def get_content_blocks(request: Request) -> ContentBlockRepository:
    return request.app.state.content_blocks


def get_static_texts(request: Request) -> StaticTextStore:
    return request.app.state.static_texts


def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_admin(request: Request) -> AdminAccount:
    return request.app.state.admin


def get_current_session(
    request: Request,
    sessions: SessionStore = Depends(get_sessions),
    settings: Settings = Depends(get_app_settings),
) -> SessionData | None:
    """Session bound to the request cookie, or None while anonymous."""
    _, data = sessions.resolve(request.cookies.get(settings.session_cookie_name))
    return data


def require_admin(session: SessionData | None = Depends(get_current_session)) -> SessionData:
    if session is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return session
