"""Module E: Admin login / logout / status."""
from fastapi import APIRouter, Depends, HTTPException, Request, Response

from sitecms.config import Settings
from sitecms.dependencies import get_admin, get_app_settings, get_audit_log, get_current_session, get_sessions
from sitecms.models import UNKNOWN_ACTOR
from sitecms.schemas.auth import AuthStatus, LoginRequest
from sitecms.schemas.common import MessageResponse
from sitecms.services.audit_log import LOGIN_FAILED, LOGIN_SUCCESS, LOGOUT, AuditLog
from sitecms.services.auth import AdminAccount, SessionData, SessionStore

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=MessageResponse)
def login(
    request: Request,
    response: Response,
    data: LoginRequest,
    admin: AdminAccount = Depends(get_admin),
    sessions: SessionStore = Depends(get_sessions),
    audit: AuditLog = Depends(get_audit_log),
    settings: Settings = Depends(get_app_settings),
):
    if not admin.authenticate(data.username, data.password):
        audit.append(LOGIN_FAILED, UNKNOWN_ACTOR, {"username": data.username})
        raise HTTPException(status_code=401, detail="Invalid credentials")

    # A new login replaces whatever session this client had
    old_token, _ = sessions.resolve(request.cookies.get(settings.session_cookie_name))
    sessions.destroy(old_token)

    token = sessions.create(admin.user_id, admin.username)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=sessions.encode_cookie(token),
        max_age=int(sessions.ttl.total_seconds()),
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    audit.append(LOGIN_SUCCESS, admin.user_id, {"username": admin.username})
    return MessageResponse(message="Logged in successfully")


@router.post("/logout", response_model=MessageResponse)
def logout(
    request: Request,
    response: Response,
    sessions: SessionStore = Depends(get_sessions),
    audit: AuditLog = Depends(get_audit_log),
    settings: Settings = Depends(get_app_settings),
):
    token, _ = sessions.resolve(request.cookies.get(settings.session_cookie_name))
    ended = sessions.destroy(token)
    if ended:
        audit.append(LOGOUT, ended.user_id, {"username": ended.username})
    response.delete_cookie(settings.session_cookie_name, httponly=True, secure=settings.is_production, samesite="lax")
    return MessageResponse(message="Logged out successfully")


@router.get("/check", response_model=AuthStatus, response_model_exclude_none=True)
def check(session: SessionData | None = Depends(get_current_session)):
    if session is None:
        return AuthStatus(authenticated=False)
    return AuthStatus(authenticated=True, username=session.username)
