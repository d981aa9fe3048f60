"""Live client polling services."""

from rift_watch.services.live_client_api import (
    LiveClientAPI,
    LiveClientError,
    LiveClientUnavailable,
)
from rift_watch.services.polling_scheduler import PollingScheduler
from rift_watch.services.response_validator import ValidationFailure, validate
from rift_watch.services.state_tracker import (
    Observation,
    PollingState,
    StateTracker,
    StateTransition,
)
from rift_watch.services.status_broadcaster import StatusBroadcaster
from rift_watch.services.status_monitor import LiveStatusMonitor
from rift_watch.services.status_reconciler import StatusReconciler

__all__ = [
    "LiveClientAPI",
    "LiveClientError",
    "LiveClientUnavailable",
    "PollingScheduler",
    "ValidationFailure",
    "validate",
    "Observation",
    "PollingState",
    "StateTracker",
    "StateTransition",
    "StatusBroadcaster",
    "LiveStatusMonitor",
    "StatusReconciler",
]
