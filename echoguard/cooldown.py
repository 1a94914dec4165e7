"""Per-key announcement cooldown."""

import threading
from typing import Dict, Optional

from echoguard.config import DEFAULT_CONFIG


def cooldown_key(cls_name: str, direction: str) -> str:
    return f"{cls_name}-{direction}"


class CooldownTracker:
    """
    Remembers when each (class, direction) key was last announced.

    Keys are never pruned; the table is bounded by the class vocabulary
    times the three directions.
    """

    def __init__(self, window_ms: float = DEFAULT_CONFIG.cooldown_ms):
        self.window_ms = window_ms
        self._last_announced: Dict[str, float] = {}
        self._lock = threading.Lock()

    def is_allowed(self, key: str, now: float) -> bool:
        """True if key was never announced or its window has fully elapsed."""
        with self._lock:
            last = self._last_announced.get(key)
        if last is None:
            return True
        return now - last > self.window_ms

    def record_announced(self, key: str, now: float) -> None:
        with self._lock:
            self._last_announced[key] = now

    def last_announced(self, key: str) -> Optional[float]:
        with self._lock:
            return self._last_announced.get(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._last_announced)
