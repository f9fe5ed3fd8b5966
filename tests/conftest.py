"""Pytest configuration - temp data directory & FastAPI TestClient."""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from sitecms.config import Settings
from sitecms.database import RecordStore
from sitecms.main import create_app
from sitecms.services.audit_log import AuditLog
from sitecms.services.content_blocks import ContentBlockRepository
from sitecms.services.events import EventRepository
from sitecms.services.static_text import StaticTextStore

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        data_dir=tmp_path / "data",
        session_secret="test-session-secret",
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        admin_password_hash="",
        bcrypt_rounds=4,
        static_text_watch_enabled=False,
    )


@pytest.fixture()
def store(settings: Settings) -> RecordStore:
    s = RecordStore(settings.data_dir)
    s.init_collections()
    return s


@pytest.fixture()
def audit(store: RecordStore) -> AuditLog:
    return AuditLog(store)


@pytest.fixture()
def events(store: RecordStore, audit: AuditLog) -> EventRepository:
    return EventRepository(store, audit)


@pytest.fixture()
def blocks(store: RecordStore, audit: AuditLog) -> ContentBlockRepository:
    return ContentBlockRepository(store, audit)


@pytest.fixture()
def texts(store: RecordStore, audit: AuditLog) -> StaticTextStore:
    t = StaticTextStore(store, audit)
    t.load()
    return t


@pytest.fixture()
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Anonymous client against a fresh app and data directory."""
    app = create_app(settings)
    with TestClient(app) as tc:
        yield tc


@pytest.fixture()
def admin_client(client: TestClient) -> TestClient:
    """Same client after a successful admin login (session cookie kept)."""
    resp = client.post("/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client
