"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket

from rift_watch import __version__
from rift_watch.config import settings
from rift_watch.api.routes.status import router as status_router
from rift_watch.api.websockets.status_ws import status_websocket
from rift_watch.services.status_broadcaster import StatusBroadcaster
from rift_watch.services.status_monitor import LiveStatusMonitor


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start polling the game client for the lifetime of the app."""
    if not hasattr(app.state, "broadcaster"):
        app.state.broadcaster = StatusBroadcaster(settings.subscriber_queue_size)
    if not hasattr(app.state, "monitor"):
        app.state.monitor = LiveStatusMonitor.from_settings(settings)
    app.state.monitor.set_status_update_callback(app.state.broadcaster.publish)
    app.state.monitor.start_monitoring()
    yield
    await app.state.monitor.close()


app = FastAPI(
    title="Rift Watch",
    description="LoL live client agent - normalized in-game status",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "rift-watch"}


app.include_router(status_router)


@app.websocket("/ws/status")
async def websocket_status(websocket: WebSocket):
    """WebSocket endpoint streaming status snapshots."""
    await status_websocket(websocket, app.state.broadcaster)
