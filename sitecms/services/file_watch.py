"""Reload static texts after the backing file is edited by hand."""
from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta

from apscheduler.schedulers.background import BackgroundScheduler

from sitecms.services.static_text import StaticTextStore

log = logging.getLogger("uvicorn.error")

POLL_JOB_ID = "static-text-poll"
RELOAD_JOB_ID = "static-text-reload"


def _signature(path) -> tuple[int, int] | None:
    try:
        st = os.stat(path)
    except OSError:
        return None
    return st.st_mtime_ns, st.st_size


class StaticTextWatcher:
    """
    Polls the file signature (mtime, size). A change schedules one reload
    debounce_ms later; further changes inside that window push it back.
    """

    def __init__(self, texts: StaticTextStore, poll_seconds: float = 1.0, debounce_ms: int = 100):
        self._texts = texts
        self.poll_seconds = poll_seconds
        self.debounce = timedelta(milliseconds=debounce_ms)
        self._scheduler: BackgroundScheduler | None = None
        self._last_signature = _signature(texts.path)

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> None:
        if self.running:
            return
        self._last_signature = _signature(self._texts.path)
        self._scheduler = BackgroundScheduler()
        self._scheduler.add_job(
            self.poll,
            "interval",
            seconds=self.poll_seconds,
            id=POLL_JOB_ID,
            max_instances=1,
            coalesce=True,
        )
        self._scheduler.start()
        log.info("Static text watcher started on %s", self._texts.path)

    def stop(self) -> None:
        if self._scheduler is not None and self._scheduler.running:
            # Let an in-flight reload finish before the store goes away
            self._scheduler.shutdown(wait=True)
        self._scheduler = None

    def poll(self) -> bool:
        """Returns True when a change was seen (and a reload scheduled)."""
        sig = _signature(self._texts.path)
        if sig == self._last_signature:
            return False
        self._last_signature = sig
        if self._scheduler is not None and self._scheduler.running:
            self._scheduler.add_job(
                self._reload,
                "date",
                run_date=datetime.now() + self.debounce,
                id=RELOAD_JOB_ID,
                replace_existing=True,
            )
        else:
            self._reload()
        return True

    def _reload(self) -> None:
        try:
            self._texts.reload()
        except Exception:
            log.exception("Static text reload failed")
