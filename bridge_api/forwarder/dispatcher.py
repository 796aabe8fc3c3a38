"""Dispatcher: SensorReading → OSC messages → UDP datagrams.

Each sensor group travels in its own datagram (no OSC bundles), the
receiver expects one message per packet. Sends are best-effort: a failed
datagram is logged and dropped, never retried.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional

from ..core.domain.reading import SensorReading
from ..core.monitoring.stats import BridgeStats
from ..metrics import BRIDGE_DATAGRAMS
from .sender import DatagramSender, SendResult

logger = logging.getLogger(__name__)

STATS_LOG_EVERY = 100


class Dispatcher:
    """Forwards decoded readings to the OSC destination.

    Called synchronously from the client task that received the frame;
    the sender is non-blocking so this never suspends.

    Usage:
        dispatcher = Dispatcher(UdpDatagramSender("127.0.0.1", 7400))
        results = dispatcher.dispatch(reading)
    """

    def __init__(self, sender: DatagramSender, stats: Optional[BridgeStats] = None):
        self._sender = sender
        self._stats = stats if stats is not None else BridgeStats()

    @property
    def sender(self) -> DatagramSender:
        return self._sender

    @property
    def stats(self) -> BridgeStats:
        return self._stats

    def dispatch(self, reading: SensorReading) -> List[SendResult]:
        """Encode and send every present group of the reading.

        Returns:
            One SendResult per datagram attempted (0, 1 or 2)
        """
        results: List[SendResult] = []

        for message in reading.to_osc_messages():
            payload = message.encode()
            result = self._sender.send(payload, message.address)
            results.append(result)

            if result.ok:
                self._stats.datagrams_sent += 1
                BRIDGE_DATAGRAMS.labels(address=message.address, status="sent").inc()
                logger.debug(
                    "[FORWARDER] %s %s (%d bytes)",
                    message.address,
                    message.args,
                    result.nbytes,
                )
            else:
                self._stats.send_failures += 1
                BRIDGE_DATAGRAMS.labels(address=message.address, status="failed").inc()
                logger.warning(
                    "[FORWARDER] Error sending %s to %s: %s",
                    message.address,
                    self._sender.destination,
                    result.error,
                )

        if any(r.ok for r in results):
            self._stats.readings_forwarded += 1
            self._stats.last_message_at = time.time()
            if self._stats.readings_forwarded % STATS_LOG_EVERY == 0:
                logger.info("[FORWARDER] %s", self._stats)

        return results
