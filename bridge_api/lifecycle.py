"""Lifecycle of the outbound socket.

The UDP sender is the only resource needing explicit teardown: it is
opened before the app accepts connections and closed on shutdown.
SIGINT/SIGTERM are handled by uvicorn, which runs the lifespan shutdown
before exiting.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .forwarder.sender import DatagramSender, SenderError

logger = logging.getLogger(__name__)


class BridgeStartupError(RuntimeError):
    """Fatal: the bridge cannot start forwarding."""


class BridgeLifecycle:
    def __init__(self, sender: DatagramSender):
        self._sender = sender

    def startup(self) -> None:
        try:
            self._sender.open()
        except SenderError as e:
            logger.error("[LIFECYCLE] Cannot open outbound socket: %s", e)
            raise BridgeStartupError(str(e)) from e
        logger.info("[LIFECYCLE] Forwarding OSC to %s", self._sender.destination)

    def shutdown(self) -> None:
        self._sender.close()
        logger.info("[LIFECYCLE] Outbound socket released")

    @asynccontextmanager
    async def lifespan(self, app: FastAPI):
        self.startup()
        try:
            yield
        finally:
            self.shutdown()
