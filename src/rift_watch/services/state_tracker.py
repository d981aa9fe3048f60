"""In-game / offline tracking that drives the adaptive polling interval."""

import logging
from dataclasses import dataclass
from enum import Enum

from rift_watch.models.game_status import GameStatus

logger = logging.getLogger(__name__)


class PollingState(str, Enum):
    """Whether the last observed cycle was in a game."""

    OFFLINE = "offline"  # Slow polling, waiting for a game to start
    IN_GAME = "in_game"  # Fast polling


class StateTransition(str, Enum):
    ENTERED_GAME = "entered_game"
    LEFT_GAME = "left_game"


@dataclass(frozen=True)
class Observation:
    """Outcome of observing one cycle."""

    status: GameStatus
    transition: StateTransition | None
    publish: bool  # Whether subscribers should receive status


class StateTracker:
    """Tracks isInGame across cycles.

    In-game snapshots are always published. Offline snapshots are published
    once when the game ends and once before anything else was published, so
    subscribers never see the same offline event on every slow poll.
    """

    def __init__(self, in_game_interval: float = 2.0, offline_interval: float = 30.0):
        self.in_game_interval = in_game_interval
        self.offline_interval = offline_interval
        self.state = PollingState.OFFLINE
        self._has_published = False

    @property
    def interval(self) -> float:
        """Seconds to wait before the next cycle."""
        if self.state == PollingState.IN_GAME:
            return self.in_game_interval
        return self.offline_interval

    def observe(self, status: GameStatus) -> Observation:
        """Record a completed cycle."""
        transition = None
        if status.is_in_game and self.state == PollingState.OFFLINE:
            self.state = PollingState.IN_GAME
            transition = StateTransition.ENTERED_GAME
            logger.info("Player entered game - increasing polling frequency")
        elif not status.is_in_game and self.state == PollingState.IN_GAME:
            self.state = PollingState.OFFLINE
            transition = StateTransition.LEFT_GAME
            logger.info("Player left game - reducing polling frequency")

        publish = (
            status.is_in_game
            or transition == StateTransition.LEFT_GAME
            or not self._has_published
        )
        if publish:
            self._has_published = True
        return Observation(status=status, transition=transition, publish=publish)

    def observe_failure(self) -> Observation:
        """Record a cycle that raised. Counts as offline."""
        return self.observe(GameStatus.offline())
