"""WebSocket handler streaming game status snapshots."""

import asyncio
import logging

from fastapi import WebSocket, WebSocketDisconnect

from rift_watch.services.status_broadcaster import StatusBroadcaster

logger = logging.getLogger(__name__)


async def _drain_client(websocket: WebSocket) -> None:
    """Read until the client goes away. Incoming messages are ignored."""
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass


async def status_websocket(websocket: WebSocket, broadcaster: StatusBroadcaster):
    """Send the latest snapshot on connect, then every published snapshot.

    Args:
        websocket: The WebSocket connection
        broadcaster: Source of published snapshots
    """
    await websocket.accept()
    queue = broadcaster.subscribe()
    disconnect_task = asyncio.create_task(_drain_client(websocket))
    logger.info(f"Status subscriber connected ({broadcaster.subscriber_count} active)")

    try:
        while True:
            next_status = asyncio.create_task(queue.get())
            done, _ = await asyncio.wait(
                {next_status, disconnect_task}, return_when=asyncio.FIRST_COMPLETED
            )
            if disconnect_task in done:
                next_status.cancel()
                break
            status = next_status.result()
            await websocket.send_json({"type": "status", "status": status.to_dict()})
    except WebSocketDisconnect:
        pass
    finally:
        disconnect_task.cancel()
        try:
            await disconnect_task
        except asyncio.CancelledError:
            pass
        broadcaster.unsubscribe(queue)
        logger.info("Status subscriber disconnected")
