"""Fan-out of published game status snapshots."""

import asyncio
import logging
from typing import Optional

from rift_watch.models.game_status import GameStatus

logger = logging.getLogger(__name__)


class StatusBroadcaster:
    """Keeps the latest snapshot and feeds bounded per-subscriber queues.

    Meant to be registered as the monitor's status callback. A subscriber
    that falls behind loses its oldest pending snapshot, never the newest.
    """

    def __init__(self, queue_size: int = 16):
        self.queue_size = queue_size
        self.latest: Optional[GameStatus] = None
        self._subscribers: set[asyncio.Queue] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def publish(self, status: GameStatus) -> None:
        self.latest = status
        for queue in self._subscribers:
            if queue.full():
                queue.get_nowait()
                logger.debug("Status subscriber is lagging, dropped oldest snapshot")
            queue.put_nowait(status)

    def subscribe(self) -> asyncio.Queue:
        """Register a new subscriber, primed with the latest snapshot."""
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.queue_size)
        if self.latest is not None:
            queue.put_nowait(self.latest)
        self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        self._subscribers.discard(queue)
