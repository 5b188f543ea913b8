"""In-memory watch party rooms: registry, chat, clock and reaper."""

from .errors import InvalidInput, RateLimited, RoomNotFound, WatchPartyError
from .limiter import RateLimiter
from .models import Message, Room
from .registry import RoomRegistry, get_registry

__all__ = [
    "InvalidInput",
    "Message",
    "RateLimited",
    "RateLimiter",
    "Room",
    "RoomNotFound",
    "RoomRegistry",
    "WatchPartyError",
    "get_registry",
]
