import threading
from typing import Dict, Optional

from infracanvas import config


class RequestSequencer:
    """
    Monotonic request tokens per action.

    A response is applied only when its token is newer than the last one
    accepted for the same action, so a slow reply never overwrites a newer one.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._issued: Dict[str, int] = {}
        self._accepted: Dict[str, int] = {}

    def next_token(self, action: str) -> int:
        with self._lock:
            token = self._issued.get(action, 0) + 1
            self._issued[action] = token
            return token

    def is_current(self, action: str, token: int) -> bool:
        """True when *token* is the most recently issued one for *action*."""
        with self._lock:
            return self._issued.get(action, 0) == token

    def accept(self, action: str, token: int) -> bool:
        """Record *token* as applied; False when a newer response already was."""
        with self._lock:
            if token <= self._accepted.get(action, 0):
                return False
            if token > self._issued.get(action, 0):
                return False
            self._accepted[action] = token
            return True


class AutosaveGate:
    """Debounce plus content gate for autosave. Clock values are passed in."""

    def __init__(self, debounce_seconds: Optional[float] = None):
        self.debounce_seconds = (
            config.AUTOSAVE_DEBOUNCE_SECONDS if debounce_seconds is None else debounce_seconds
        )
        self._last_change: Optional[float] = None
        self._last_saved: Optional[str] = None

    def mark_changed(self, now: float) -> None:
        self._last_change = now

    def should_save(self, payload_json: str, now: float) -> bool:
        if self._last_change is None:
            return False
        if now - self._last_change < self.debounce_seconds:
            return False
        return payload_json != self._last_saved

    def mark_saved(self, payload_json: str) -> None:
        self._last_saved = payload_json
        self._last_change = None
