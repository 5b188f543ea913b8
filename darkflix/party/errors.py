"""Watch party exception classes."""


class WatchPartyError(Exception):
    """Base exception for caller-facing watch party errors."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(WatchPartyError):
    """Raised when a required field is missing or empty."""

    status_code = 400
    default_message = "Invalid input"


class RoomNotFound(WatchPartyError):
    """Raised when a room code does not match a live room."""

    status_code = 404
    default_message = "Room not found"


class RateLimited(WatchPartyError):
    """Raised when a display name posts again inside the rate limit window."""

    status_code = 429
    default_message = "Slow down a bit before sending another message."
