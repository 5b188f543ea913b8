import logging
import threading

from flask import current_app

from .codes import generate_room_code
from .errors import InvalidInput, RateLimited, RoomNotFound
from .limiter import RateLimiter
from .models import Message, Room, now_ms

logger = logging.getLogger(__name__)

EXTENSION_KEY = 'watch_party'


class RoomRegistry:
    """Owns every live watch party room.

    Each public method holds the registry lock for its whole body, so a
    lookup and the mutation that follows it can never interleave with a
    clock tick, a reaper sweep or another request.
    """

    def __init__(self, rate_limiter=None, clock=now_ms, code_length=5):
        if code_length < 1:
            raise ValueError(f"code_length must be at least 1, got {code_length}")
        self.rate_limiter = rate_limiter or RateLimiter()
        self.clock = clock
        self.code_length = code_length
        self._rooms: dict[str, Room] = {}
        self._lock = threading.RLock()

    def __len__(self):
        with self._lock:
            return len(self._rooms)

    def __contains__(self, code):
        with self._lock:
            return code in self._rooms

    def _get(self, code) -> Room:
        room = self._rooms.get(code)
        if room is None:
            raise RoomNotFound()
        return room

    def create_room(self, display_name: str) -> str:
        if not display_name:
            raise InvalidInput("Username is required")
        with self._lock:
            code = generate_room_code(self._rooms.__contains__, length=self.code_length)
            self._rooms[code] = Room(
                code=code,
                room_name=f"{display_name}'s room",
                last_activity=self.clock(),
            )
        logger.info(f"Created room {code} for {display_name}")
        return code

    def set_room_details(self, code, url, movie_title=None):
        with self._lock:
            room = self._get(code)
            room.video_url = url or ''
            room.movie_title = movie_title or ''
            room.touch(self.clock())

    def get_current_time(self, code) -> int:
        with self._lock:
            room = self._get(code)
            room.touch(self.clock())
            return room.current_time

    def get_room_details(self, code) -> dict:
        with self._lock:
            room = self._get(code)
            room.touch(self.clock())
            return room.to_details()

    def list_configured_rooms(self) -> list[dict]:
        with self._lock:
            return [room.to_summary() for room in self._rooms.values() if room.is_configured]

    def post_message(self, code, username, profile_picture, message) -> Message:
        if not username or not message:
            raise InvalidInput("Username and message are required")
        with self._lock:
            room = self._get(code)
            now = self.clock()
            if not self.rate_limiter.allow(username, now, room_code=code):
                logger.warning(f"Rate limited {username!r} in room {code}")
                raise RateLimited()
            msg = Message(
                username=username,
                message=message,
                timestamp=now,
                profile_picture=profile_picture,
            )
            room.append_message(msg)
            room.touch(now)
            return msg

    def advance_clock(self, seconds: int) -> int:
        with self._lock:
            for room in self._rooms.values():
                room.current_time += seconds
            return len(self._rooms)

    def reap(self, max_idle_ms: int) -> list[str]:
        """Delete unconfigured rooms and rooms idle for longer than ``max_idle_ms``."""
        with self._lock:
            now = self.clock()
            doomed = [
                code
                for code, room in self._rooms.items()
                if not room.is_configured or now - room.last_activity > max_idle_ms
            ]
            for code in doomed:
                del self._rooms[code]
        if doomed:
            logger.info(f"Reaped {len(doomed)} room(s): {', '.join(doomed)}")
        return doomed


def init_registry(app, clock=None):
    limiter = RateLimiter(
        window_ms=app.config.get('WATCH_PARTY_RATE_LIMIT_MS', 5000),
        per_room=app.config.get('WATCH_PARTY_RATE_LIMIT_PER_ROOM', False),
    )
    registry = RoomRegistry(
        rate_limiter=limiter,
        clock=clock or now_ms,
        code_length=app.config.get('WATCH_PARTY_CODE_LENGTH', 5),
    )
    app.extensions[EXTENSION_KEY] = registry
    return registry


def get_registry() -> RoomRegistry:
    return current_app.extensions[EXTENSION_KEY]
