"""
EventBus — in-process pub/sub for store change notifications.

Stores publish an event every time their backing state changes; a UI
layer subscribes with a callback and re-reads the store's derived views.
A bounded ring buffer lets late subscribers replay what they missed.

Message standard (v1)
─────────────────────
Every event is a dict with these fields::

    {
        "v": 1,                         # schema version
        "ts": 1739648400.123,           # timestamp
        "seq": 47,                      # monotonic sequence
        "type": "versions:installed",   # <domain>:<action>
        "key": "installed",             # resource identifier
        "data": { ... },                # event-specific payload
    }

Optional fields: ``error``.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from typing import Any, Callable

logger = logging.getLogger(__name__)

_SCHEMA_VERSION = 1

Subscriber = Callable[[dict], None]


class EventBus:
    """Thread-safe, in-process pub/sub with bounded replay buffer.

    Parameters
    ----------
    buffer_size : int
        Maximum number of events kept for replay. Older events are
        silently discarded.
    """

    def __init__(self, *, buffer_size: int = 200) -> None:
        self._lock = threading.Lock()
        self._seq: int = 0
        self._buffer: deque[dict] = deque(maxlen=buffer_size)
        self._subscribers: list[Subscriber] = []
        self._latest: dict[str, dict] = {}  # key → latest event

    # ── Properties ──────────────────────────────────────────────

    @property
    def seq(self) -> int:
        """Current sequence number (monotonically increasing)."""
        with self._lock:
            return self._seq

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    # ── Publishing ──────────────────────────────────────────────

    def publish(
        self,
        event_type: str,
        *,
        key: str = "",
        data: dict[str, Any] | None = None,
        **kw: Any,
    ) -> dict:
        """Broadcast an event to every subscriber.

        Returns the full event dict with ``seq`` assigned. A subscriber
        that raises is logged and dropped; the others still receive it.
        """
        with self._lock:
            self._seq += 1
            event: dict[str, Any] = {
                "v": _SCHEMA_VERSION,
                "ts": time.time(),
                "seq": self._seq,
                "type": event_type,
                "key": key,
                "data": data or {},
                **kw,
            }
            self._buffer.append(event)
            if key:
                self._latest[key] = event
            subscribers = list(self._subscribers)

        # Deliver outside the lock (callbacks may publish)
        dead: list[Subscriber] = []
        for callback in subscribers:
            try:
                callback(event)
            except Exception as e:
                logger.warning("Dropping subscriber %r after error: %s", callback, e)
                dead.append(callback)
        if dead:
            with self._lock:
                for callback in dead:
                    if callback in self._subscribers:
                        self._subscribers.remove(callback)

        extra = f" error={kw['error'][:80]}" if "error" in kw else ""
        logger.debug("event %s key=%s%s", event_type, key or "-", extra)
        return event

    # ── Subscribing ─────────────────────────────────────────────

    def subscribe(self, callback: Subscriber, *, since: int | None = None) -> Callable[[], None]:
        """Register a callback for future events.

        If ``since`` is given, buffered events with ``seq > since`` are
        replayed to the callback first.

        Returns a function that unsubscribes the callback.
        """
        with self._lock:
            replay = [e for e in self._buffer if since is not None and e["seq"] > since]
            self._subscribers.append(callback)

        for event in replay:
            callback(event)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def events(self, *, since: int = 0) -> list[dict]:
        """Buffered events with ``seq > since``, oldest first."""
        with self._lock:
            return [e for e in self._buffer if e["seq"] > since]

    # ── Snapshot ────────────────────────────────────────────────

    def snapshot(self) -> dict[str, dict]:
        """Latest event per resource key."""
        with self._lock:
            return dict(self._latest)


# ── Module-level singleton ──────────────────────────────────────

bus = EventBus()
"""The global event bus instance.

Import and use::

    from fnm_desk.core.services.event_bus import bus
    unsubscribe = bus.subscribe(lambda event: print(event["type"]))
"""
