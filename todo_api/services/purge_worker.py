"""Background worker that reclaims expired revocation ledger rows."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from sqlalchemy.orm import Session

from todo_api.config import settings
from todo_api.core.database import SessionLocal
from todo_api.services.revocation_ledger import revocation_ledger

logger = logging.getLogger(__name__)


class PurgeWorker:
    """Periodically delete revoked tokens that are past their expiry."""

    def __init__(
        self,
        session_factory: Callable[[], Session] = SessionLocal,
        interval_seconds: Optional[float] = None,
    ) -> None:
        self._session_factory = session_factory
        self._interval = interval_seconds
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._heartbeat: float = 0.0
        self._purged_count: int = 0
        self._lock = threading.Lock()

    @property
    def interval(self) -> float:
        value = self._interval if self._interval is not None else settings.PURGE_INTERVAL_SECONDS
        return max(1.0, value)

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run_loop, name="revocation-purge", daemon=True)
        self._thread.start()
        logger.info("Revocation purge worker started")

    def stop(self) -> None:
        self._stop_event.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5)
        logger.info("Revocation purge worker stopped")

    def status(self) -> dict:
        return {
            "running": self.is_running(),
            "last_heartbeat": self._heartbeat,
            "purged_count": self._purged_count,
        }

    def _run_loop(self) -> None:
        while not self._stop_event.is_set():
            try:
                self.purge_once()
            except Exception as exc:
                logger.exception("Revocation purge failed: %s", exc)
            self._heartbeat = time.time()
            self._stop_event.wait(self.interval)

    def purge_once(self) -> int:
        db = self._session_factory()
        try:
            removed = revocation_ledger.purge_expired(db)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
        with self._lock:
            self._purged_count += removed
        return removed


purge_worker = PurgeWorker()
