"""Tests for the event and content block repositories."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

import sitecms.services.repository as repository_module
from sitecms.database import EVENTS


@pytest.fixture()
def frozen_clock(monkeypatch):
    """Clock that advances one second per call."""
    state = {"now": datetime(2025, 1, 1, tzinfo=timezone.utc)}

    def _now():
        state["now"] += timedelta(seconds=1)
        return state["now"]

    monkeypatch.setattr(repository_module, "utcnow", _now)
    return state


class TestEventCreate:
    def test_create_sets_id_timestamps_and_defaults(self, events):
        ev = events.create({"title": "Launch", "date": "2025-01-01"}, "1")
        assert ev.id
        assert ev.archived is False
        assert ev.created_at == ev.updated_at
        assert ev.description is None

    def test_ids_are_unique(self, events):
        ids = {events.create({"title": f"E{i}", "date": "2025-01-01"}, "1").id for i in range(25)}
        assert len(ids) == 25

    def test_create_ignores_archived_true(self, events):
        ev = events.create({"title": "X", "date": "2025-01-01", "archived": True}, "1")
        assert ev.archived is False

    def test_persisted_with_camel_case_fields(self, events, store):
        events.create({"title": "Launch", "date": "2025-01-01", "imageUrl": "/img.png"}, "1")
        doc = store.load(EVENTS)[0]
        assert doc["imageUrl"] == "/img.png"
        assert {"createdAt", "updatedAt", "archived"} <= set(doc)

    def test_create_audited(self, events, audit):
        ev = events.create({"title": "Launch", "date": "2025-01-01"}, "1")
        entry = audit.recent(1)[0]
        assert entry.action == "event_created"
        assert entry.user_id == "1"
        assert entry.details == {"eventId": ev.id, "title": "Launch"}


class TestEventUpdate:
    def test_update_overlays_only_given_fields(self, events, frozen_clock):
        ev = events.create({"title": "Launch", "date": "2025-01-01", "location": "Hall"}, "1")
        updated = events.update(ev.id, {"title": "Launch Party"}, "1")
        assert updated.title == "Launch Party"
        assert updated.location == "Hall"
        assert updated.date == "2025-01-01"
        assert updated.created_at == ev.created_at
        assert updated.updated_at > ev.updated_at
        assert events.get(ev.id) == updated

    def test_update_cannot_change_id_or_created_at(self, events):
        ev = events.create({"title": "A", "date": "2025-01-01"}, "1")
        updated = events.update(ev.id, {"id": "other", "createdAt": "2000-01-01T00:00:00Z"}, "1")
        assert updated.id == ev.id
        assert updated.created_at == ev.created_at

    def test_update_unknown_returns_none_without_audit(self, events, audit):
        assert events.update("missing", {"title": "x"}, "1") is None
        assert audit.recent() == []

    def test_update_audited(self, events, audit):
        ev = events.create({"title": "A", "date": "2025-01-01"}, "1")
        events.update(ev.id, {"title": "B"}, "1")
        entry = audit.recent(1)[0]
        assert (entry.action, entry.user_id, entry.details["title"]) == ("event_updated", "1", "B")


class TestEventDelete:
    def test_delete_removes_record(self, events):
        ev = events.create({"title": "A", "date": "2025-01-01"}, "1")
        keep = events.create({"title": "B", "date": "2025-01-02"}, "1")
        assert events.delete(ev.id, "1").id == ev.id
        assert events.get(ev.id) is None
        assert [e.id for e in events.list_events(archived=None)] == [keep.id]

    def test_delete_unknown_is_noop(self, events, audit):
        assert events.delete("missing", "1") is None
        assert audit.recent() == []

    def test_delete_audited(self, events, audit):
        ev = events.create({"title": "A", "date": "2025-01-01"}, "1")
        events.delete(ev.id, "1")
        assert audit.recent(1)[0].action == "event_deleted"


class TestArchive:
    def test_archive_and_unarchive_move_between_views(self, events):
        ev = events.create({"title": "A", "date": "2025-01-01"}, "1")
        events.archive(ev.id, "1")
        assert ev.id not in [e.id for e in events.list_events()]
        assert ev.id in [e.id for e in events.list_events(archived=True)]
        events.unarchive(ev.id, "1")
        assert ev.id in [e.id for e in events.list_events()]
        assert events.list_events(archived=True) == []

    def test_archive_actions_are_audited_once(self, events, audit):
        ev = events.create({"title": "A", "date": "2025-01-01"}, "1")
        events.archive(ev.id, "1")
        events.unarchive(ev.id, "1")
        assert [e.action for e in audit.recent(2)] == ["event_unarchived", "event_archived"]

    def test_archive_unknown(self, events):
        assert events.archive("missing", "1") is None


def test_malformed_records_are_skipped_by_list(events, store):
    ev = events.create({"title": "A", "date": "2025-01-01"}, "1")
    docs = store.load(EVENTS)
    docs.append({"id": "broken"})
    store.save(EVENTS, docs)
    assert [e.id for e in events.list_events()] == [ev.id]
    events.update(ev.id, {"title": "B"}, "1")
    assert any(d.get("id") == "broken" for d in store.load(EVENTS))


class TestContentBlocks:
    def test_create_defaults_position(self, blocks):
        b = blocks.create({"page": "home", "text": "Hi"}, "1")
        assert b.position == 0
        assert b.alt_text is None

    def test_list_by_page_filters_and_orders_by_position(self, blocks):
        second = blocks.create({"page": "home", "text": "2", "position": 2}, "1")
        blocks.create({"page": "about", "text": "x"}, "1")
        first = blocks.create({"page": "home", "text": "1", "position": 1}, "1")
        tie = blocks.create({"page": "home", "text": "2b", "position": 2}, "1")
        assert [b.id for b in blocks.list_by_page("home")] == [first.id, second.id, tie.id]

    def test_update_and_delete(self, blocks):
        b = blocks.create({"page": "home", "text": "Hi", "altText": "alt"}, "1")
        updated = blocks.update(b.id, {"text": "Hello"}, "1")
        assert (updated.text, updated.alt_text) == ("Hello", "alt")
        assert blocks.delete(b.id, "1") is not None
        assert blocks.get(b.id) is None

    def test_mutations_audited_with_block_details(self, blocks, audit):
        b = blocks.create({"page": "home", "text": "Hi"}, "1")
        blocks.update(b.id, {"text": "x"}, "1")
        blocks.delete(b.id, "1")
        actions = [e.action for e in audit.recent(3)]
        assert actions == ["content_block_deleted", "content_block_updated", "content_block_created"]
        assert audit.recent(1)[0].details == {"blockId": b.id, "page": "home"}


class TestUnreadableRecord:
    """A stored event missing createdAt/updatedAt counts as not found and is never rewritten."""

    LEGACY = {"id": "legacy", "title": "Old event", "date": "2024-01-01", "created_at": "2024-01-01T00:00:00Z"}

    @pytest.fixture()
    def legacy_docs(self, store):
        store.save(EVENTS, [dict(self.LEGACY)])
        return store.load(EVENTS)

    def test_get_is_not_found(self, events, legacy_docs):
        assert events.get("legacy") is None

    def test_update_is_not_found_and_leaves_file(self, events, store, audit, legacy_docs):
        assert events.update("legacy", {"location": "x"}, "1") is None
        assert store.load(EVENTS) == legacy_docs
        assert audit.recent() == []

    def test_archive_is_not_found(self, events, store, legacy_docs):
        assert events.archive("legacy", "1") is None
        assert events.unarchive("legacy", "1") is None
        assert store.load(EVENTS) == legacy_docs

    def test_delete_is_not_found_and_keeps_record(self, events, store, audit, legacy_docs):
        assert events.delete("legacy", "1") is None
        assert store.load(EVENTS) == legacy_docs
        assert audit.recent() == []

    def test_deleting_a_neighbour_keeps_it(self, events, store, audit, legacy_docs):
        ev = events.create({"title": "New", "date": "2025-01-01"}, "1")
        assert events.delete(ev.id, "1").id == ev.id
        assert store.load(EVENTS) == legacy_docs
        assert audit.recent(1)[0].action == "event_deleted"
