import threading


class RateLimiter:
    """Tracks the last accepted message time per display name.

    Names are limited across every room unless ``per_room`` is set, in which
    case the key is the pair of room code and name.
    """

    def __init__(self, window_ms=5000, per_room=False):
        self.window_ms = window_ms
        self.per_room = per_room
        self._last_seen = {}
        self._lock = threading.Lock()

    def _key(self, name, room_code):
        if self.per_room:
            return (room_code, name)
        return name

    def allow(self, name: str, now: int, room_code: str | None = None) -> bool:
        key = self._key(name, room_code)
        with self._lock:
            last = self._last_seen.get(key)
            if last is not None and now - last < self.window_ms:
                return False
            self._last_seen[key] = now
            return True

    def prune(self, now: int) -> int:
        """Forget names whose last message is at least one window old."""
        with self._lock:
            stale = [k for k, last in self._last_seen.items() if now - last >= self.window_ms]
            for key in stale:
                del self._last_seen[key]
            return len(stale)

    def __len__(self):
        with self._lock:
            return len(self._last_seen)
