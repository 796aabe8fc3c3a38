"""WebSocket handler: browser sensor stream → Dispatcher.

Protocol:
1. Client opens the WebSocket (no handshake message)
2. Client → {type: "sensorData", accelerometer: {...}, gyroscope: {...}, timestamp}
   repeatedly, at the client's sampling interval
3. Client closes the socket, or goes away

The server never answers frames. A bad frame is logged and dropped; the
connection stays open.
"""

from __future__ import annotations

import logging
import time
from typing import Union

from fastapi import WebSocket, WebSocketDisconnect

from ...core.monitoring.stats import BridgeStats
from ...forwarder.dispatcher import Dispatcher
from ...metrics import BRIDGE_FRAMES
from .sessions import ClientRegistry, ClientSession
from .validators import DecodeResult, decode_sensor_frame

logger = logging.getLogger(__name__)


def _peer_name(websocket: WebSocket) -> str:
    client = websocket.client
    if client is None:
        return "unknown"
    return f"{client.host}:{client.port}"


def handle_frame(
    raw: Union[str, bytes],
    session: ClientSession,
    dispatcher: Dispatcher,
    stats: BridgeStats,
) -> DecodeResult:
    """Decode one frame and forward it; exactly one dispatch per valid frame."""
    stats.frames_received += 1
    session.frames_received += 1
    stats.last_message_at = time.time()

    result = decode_sensor_frame(raw)
    if not result.valid:
        stats.frames_rejected += 1
        session.frames_rejected += 1
        BRIDGE_FRAMES.labels(status="rejected").inc()
        logger.warning(
            "[WS] Frame rejected: session=%s error=%s",
            session.session_id,
            result.error,
        )
        return result

    for warning in result.warnings:
        logger.warning("[WS] %s (session=%s)", warning, session.session_id)

    BRIDGE_FRAMES.labels(status="accepted").inc()
    reading = result.reading
    logger.debug(
        "[WS] Received sensor data: session=%s accel=%s gyro=%s",
        session.session_id,
        reading.accelerometer,
        reading.gyroscope,
    )
    dispatcher.dispatch(reading)
    return result


async def serve_client(
    websocket: WebSocket,
    dispatcher: Dispatcher,
    registry: ClientRegistry,
    stats: BridgeStats,
) -> None:
    """Run one client session until the socket closes."""
    await websocket.accept()

    session = registry.register(_peer_name(websocket))
    stats.clients_connected = len(registry)
    logger.info(
        "[WS] Client connected: session=%s peer=%s",
        session.session_id,
        session.peer,
    )

    try:
        while True:
            message = await websocket.receive()

            if message["type"] == "websocket.disconnect":
                break

            raw = message.get("text")
            if raw is None:
                raw = message.get("bytes")
            if raw is None:
                continue

            handle_frame(raw, session, dispatcher, stats)

    except WebSocketDisconnect:
        pass
    except Exception as e:
        logger.exception("[WS] Session error: session=%s error=%s", session.session_id, e)
    finally:
        registry.deregister(session.session_id)
        stats.clients_connected = len(registry)
        logger.info(
            "[WS] Client disconnected: session=%s frames=%d rejected=%d",
            session.session_id,
            session.frames_received,
            session.frames_rejected,
        )


async def websocket_bridge(websocket: WebSocket):
    """WebSocket endpoint; collaborators come from app.state (see main.create_app)."""
    state = websocket.app.state
    await serve_client(websocket, state.dispatcher, state.registry, state.stats)
