"""Site CMS – FastAPI application."""
import logging

from fastapi import FastAPI

from sitecms.config import DEFAULT_ADMIN_PASSWORD, DEFAULT_SESSION_SECRET, Settings, get_settings
from sitecms.database import RecordStore
from sitecms.routers import auth, content, events, logs, static_texts
from sitecms.services.audit_log import AuditLog
from sitecms.services.auth import AdminAccount, SessionStore
from sitecms.services.content_blocks import ContentBlockRepository
from sitecms.services.events import EventRepository
from sitecms.services.file_watch import StaticTextWatcher
from sitecms.services.static_text import StaticTextStore

log = logging.getLogger("uvicorn.error")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, debug=settings.debug)

    store = RecordStore(settings.data_dir)
    audit_log = AuditLog(
        store,
        max_entries=settings.audit_log_max_entries,
        default_limit=settings.audit_log_default_limit,
    )
    static_text_store = StaticTextStore(store, audit_log)

    app.state.settings = settings
    app.state.store = store
    app.state.audit_log = audit_log
    app.state.events = EventRepository(store, audit_log)
    app.state.content_blocks = ContentBlockRepository(store, audit_log)
    app.state.static_texts = static_text_store
    app.state.sessions = SessionStore(settings.session_secret, ttl_hours=settings.session_ttl_hours)
    app.state.watcher = None

    app.include_router(auth.router)
    app.include_router(events.router)
    app.include_router(content.router)
    app.include_router(logs.router)
    app.include_router(static_texts.router)

    @app.on_event("startup")
    def startup():
        if settings.session_secret == DEFAULT_SESSION_SECRET:
            print("[Config] WARNING: SESSION_SECRET is the development default; set it in .env before deploying")
        if not settings.admin_password_hash and settings.admin_password == DEFAULT_ADMIN_PASSWORD:
            print("[Config] WARNING: admin account uses the default password; set ADMIN_PASSWORD_HASH or ADMIN_PASSWORD in .env")
        app.state.admin = AdminAccount.from_settings(settings)
        store.init_collections()
        static_text_store.load()
        if settings.static_text_watch_enabled:
            try:
                watcher = StaticTextWatcher(
                    static_text_store,
                    poll_seconds=settings.static_text_poll_seconds,
                    debounce_ms=settings.static_text_debounce_ms,
                )
                watcher.start()
                app.state.watcher = watcher
            except Exception as e:
                log.warning("Static text watcher not started; external edits need POST /api/static-texts/reload. Error: %s", e)

    @app.on_event("shutdown")
    def shutdown():
        if app.state.watcher is not None:
            app.state.watcher.stop()
            app.state.watcher = None

    @app.get("/")
    def root():
        return {"app": settings.app_name, "status": "ok"}

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
