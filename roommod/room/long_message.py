"""Default long-message sender that splits announcements by line."""
import logging
from typing import Optional

from roommod.room.protocols import Announcer

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 1000


class ChunkedAnnouncer:
    """Sends a multi-line message as a series of announcements.

    Lines are packed greedily into chunks no longer than ``max_length``.
    A single line longer than the limit is cut into fixed-size pieces.
    """

    def __init__(self, announcer: Announcer, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        if max_length < 1:
            raise ValueError("max_length must be positive")
        self._announcer = announcer
        self._max_length = max_length

    @property
    def max_length(self) -> int:
        return self._max_length

    def chunks(self, message: str) -> list[str]:
        if not message:
            return []
        result: list[str] = []
        current: Optional[str] = None
        for line in message.split("\n"):
            for piece in self._split_line(line):
                if current is None:
                    current = piece
                elif len(current) + 1 + len(piece) <= self._max_length:
                    current = f"{current}\n{piece}"
                else:
                    result.append(current)
                    current = piece
        if current is not None:
            result.append(current)
        return result

    def _split_line(self, line: str) -> list[str]:
        if len(line) <= self._max_length:
            return [line]
        return [line[i:i + self._max_length] for i in range(0, len(line), self._max_length)]

    def send_long_announcement(self, message: str, target_id: Optional[int], color: int) -> None:
        parts = self.chunks(message)
        logger.debug("Sending long announcement in %d part(s) to %s", len(parts), target_id)
        for part in parts:
            self._announcer.send_announcement(part, target_id, color)
