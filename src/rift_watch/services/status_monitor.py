"""League of Legends status monitoring.

Ties the reconciler, state tracker and scheduler together behind the small
interface the rest of the agent uses.
"""

import logging
from typing import Callable, Optional

from rift_watch.config import Settings
from rift_watch.models.game_status import GameStatus
from rift_watch.services.live_client_api import LiveClientAPI
from rift_watch.services.polling_scheduler import PollingScheduler
from rift_watch.services.state_tracker import StateTracker
from rift_watch.services.status_reconciler import StatusReconciler

logger = logging.getLogger(__name__)

StatusCallback = Callable[[GameStatus], None]


class LiveStatusMonitor:
    """Polls the live client and reports GameStatus snapshots to a callback."""

    def __init__(
        self,
        api: Optional[LiveClientAPI] = None,
        in_game_interval: float = 2.0,
        offline_interval: float = 30.0,
    ):
        """Initialize the monitor.

        Args:
            api: Live client to poll (defaults to the local game client)
            in_game_interval: Seconds between polls while in a game
            offline_interval: Seconds between polls otherwise
        """
        self.api = api or LiveClientAPI()
        self.reconciler = StatusReconciler(self.api)
        self.tracker = StateTracker(in_game_interval, offline_interval)
        self.scheduler = PollingScheduler(self._poll, lambda: self.tracker.interval)
        self._callback: Optional[StatusCallback] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "LiveStatusMonitor":
        api = LiveClientAPI(
            base_url=settings.live_client_base_url,
            timeout=settings.request_timeout,
            ca_bundle=settings.live_client_ca_bundle,
        )
        return cls(
            api,
            in_game_interval=settings.in_game_poll_interval,
            offline_interval=settings.offline_poll_interval,
        )

    def set_status_update_callback(self, callback: StatusCallback) -> None:
        """Register the function that receives every published GameStatus."""
        self._callback = callback

    def start_monitoring(self) -> None:
        """Poll once now, then on the adaptive interval."""
        logger.info("Starting League of Legends status monitoring")
        self.scheduler.start()

    def stop_monitoring(self) -> None:
        """Cancel the pending poll. A cycle already running is left to finish."""
        self.scheduler.stop()
        logger.info("Stopped League of Legends status monitoring")

    async def get_game_status(self) -> GameStatus:
        """Reconcile once on demand. Does not touch the polling state."""
        return await self.reconciler.get_game_status()

    async def close(self) -> None:
        """Stop polling, let the in-flight cycle finish and release the client."""
        self.stop_monitoring()
        await self.scheduler.wait_idle()
        await self.api.close()

    async def _poll(self) -> None:
        try:
            status = await self.reconciler.get_game_status()
        except Exception:
            logger.warning("Game status cycle failed, treating as offline", exc_info=True)
            observation = self.tracker.observe_failure()
        else:
            observation = self.tracker.observe(status)

        if observation.publish:
            self._publish(observation.status)

    def _publish(self, status: GameStatus) -> None:
        if self._callback is None:
            return
        try:
            self._callback(status)
        except Exception:
            logger.exception("Status update callback failed")
