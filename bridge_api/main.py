from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from common.config import Settings, get_settings

from . import __version__
from .core.monitoring.stats import BridgeStats
from .endpoints import client_config_router, health_router, static_router
from .forwarder.dispatcher import Dispatcher
from .forwarder.sender import DatagramSender, UdpDatagramSender
from .lifecycle import BridgeLifecycle
from .transports.websocket import ClientRegistry, websocket_bridge

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    sender: Optional[DatagramSender] = None,
) -> FastAPI:
    """Build the bridge application.

    The outbound sender is created here but only opened by the lifespan,
    so building the app has no network side effects. Pass a sender to
    capture datagrams in tests.
    """
    settings = settings or get_settings()
    if sender is None:
        sender = UdpDatagramSender(settings.osc_host, settings.osc_port)

    stats = BridgeStats()
    lifecycle = BridgeLifecycle(sender)

    app = FastAPI(
        title="Motion OSC Bridge",
        version=__version__,
        lifespan=lifecycle.lifespan,
    )
    app.state.settings = settings
    app.state.stats = stats
    app.state.registry = ClientRegistry()
    app.state.dispatcher = Dispatcher(sender, stats)

    # The page connects to the same origin it was served from.
    app.add_api_websocket_route("/", websocket_bridge)

    app.include_router(health_router)
    app.include_router(client_config_router)
    app.include_router(static_router)

    return app


app = create_app()
