import time
from dataclasses import dataclass, field


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Message:
    username: str
    message: str
    timestamp: int
    profile_picture: str | None = None

    def to_dict(self):
        return {
            'username': self.username,
            'profilePicture': self.profile_picture,
            'message': self.message,
            'timestamp': self.timestamp,
        }


@dataclass
class Room:
    code: str
    room_name: str
    last_activity: int
    video_url: str = ''
    movie_title: str = ''
    current_time: int = 0
    chat: list[Message] = field(default_factory=list)

    @property
    def is_configured(self) -> bool:
        return bool(self.video_url)

    def touch(self, now: int):
        self.last_activity = now

    def append_message(self, message: Message):
        self.chat.append(message)

    def to_details(self):
        return {
            'videoUrl': self.video_url,
            'roomName': self.room_name,
            'movieTitle': self.movie_title,
            'chat': [m.to_dict() for m in self.chat],
        }

    def to_summary(self):
        return {
            'code': self.code,
            'roomName': self.room_name,
            'movieTitle': self.movie_title,
        }
