"""Single-shot timer chain for polling."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class PollingScheduler:
    """Runs ``cycle`` repeatedly with a variable pause in between.

    The next timer is armed only after the previous cycle has settled, so a
    slow cycle stretches the spacing instead of overlapping with the next
    one. ``next_interval`` is asked for the pause each time.
    """

    def __init__(
        self,
        cycle: Callable[[], Awaitable[None]],
        next_interval: Callable[[], float],
    ):
        self._cycle = cycle
        self._next_interval = next_interval
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._timer: Optional[asyncio.TimerHandle] = None
        self._task: Optional[asyncio.Task] = None
        self._running = False
        self._generation = 0
        self.last_delay: Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Run one cycle immediately, then keep polling. Needs a running loop.

        If a cycle from before the last stop() is still running, the first
        cycle of the new chain waits for it to finish.
        """
        if self._running:
            return
        self._loop = asyncio.get_running_loop()
        self._running = True
        # A cycle left over from before a stop() must not re-arm this chain
        self._generation += 1
        if self.in_flight:
            # The leftover cycle starts this chain once it settles
            return
        self._fire(self._generation)

    def stop(self) -> None:
        """Cancel the pending timer. An in-flight cycle is left to finish."""
        self._running = False
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def wait_idle(self) -> None:
        """Wait for the in-flight cycle, if any."""
        if self._task is not None and not self._task.done():
            await asyncio.shield(self._task)

    def _fire(self, generation: int) -> None:
        self._timer = None
        if not self._running or generation != self._generation:
            return
        self._task = self._loop.create_task(self._run_cycle(generation))

    async def _run_cycle(self, generation: int) -> None:
        try:
            await self._cycle()
        except Exception:
            logger.exception("Polling cycle failed")
        if generation != self._generation:
            self._fire(self._generation)
        else:
            self._arm(generation)

    def _arm(self, generation: int) -> None:
        if not self._running or generation != self._generation:
            return
        delay = self._next_interval()
        self.last_delay = delay
        self._timer = self._loop.call_later(delay, self._fire, generation)
