"""Mediator - users talk through a ChatRoom and never reference each other."""

from datetime import datetime
from typing import Callable, List, Optional

from gof_patterns.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ChatRoom:
    """
    Formats messages and fans them out to every other member.

    ``clock`` supplies the timestamp; it defaults to datetime.now and can be
    replaced for reproducible output.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or datetime.now
        self._members: List['User'] = []
        self.transcript: List[str] = []

    def join(self, user: 'User') -> None:
        if user not in self._members:
            self._members.append(user)

    def show_message(self, user: 'User', message: str) -> str:
        line = f"{self._clock():%Y-%m-%d %H:%M:%S} [{user.name}] : {message}"
        self.transcript.append(line)
        recipients = [member for member in self._members if member is not user]
        for member in recipients:
            member.received.append(line)
        logger.debug("Message relayed", sender=user.name, recipients=len(recipients))
        return line


class User:
    def __init__(self, name: str, room: ChatRoom):
        self.name = name
        self._room = room
        self.received: List[str] = []
        room.join(self)

    def send(self, message: str) -> str:
        return self._room.show_message(self, message)


def demo():
    room = ChatRoom(clock=lambda: datetime(2024, 1, 1, 12, 0, 0))
    robert = User("Robert", room)
    john = User("John", room)
    robert.send("Hi! John!")
    john.send("Hello! Robert!")
    return list(room.transcript)
