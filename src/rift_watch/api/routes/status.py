"""REST endpoints for the current game status."""

from typing import Annotated, Any

from fastapi import APIRouter, Query, Request
from pydantic import BaseModel

router = APIRouter(prefix="/api", tags=["status"])


class StatusResponse(BaseModel):
    """Latest game status and whether monitoring is active."""

    monitoring: bool
    subscribers: int
    status: dict[str, Any] | None


@router.get("/status", response_model=StatusResponse)
async def get_status(
    request: Request,
    refresh: Annotated[bool, Query(description="Poll the game client now")] = False,
):
    """Return the last published status, or a fresh one when refresh is set.

    A refresh does not change polling cadence and is not pushed to
    subscribers.
    """
    monitor = request.app.state.monitor
    broadcaster = request.app.state.broadcaster

    if refresh:
        status = await monitor.get_game_status()
    else:
        status = broadcaster.latest

    return StatusResponse(
        monitoring=monitor.scheduler.is_running,
        subscribers=broadcaster.subscriber_count,
        status=status.to_dict() if status is not None else None,
    )
