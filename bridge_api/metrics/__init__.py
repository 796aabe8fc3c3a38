"""Prometheus metrics of the bridge.

Defined once at import time, shared by the WebSocket handler and the
forwarder.
"""

from prometheus_client import Counter, Gauge

BRIDGE_FRAMES = Counter(
    "bridge_frames_total",
    "WebSocket frames received by the bridge",
    ["status"],  # accepted, rejected
)

BRIDGE_DATAGRAMS = Counter(
    "bridge_datagrams_total",
    "OSC datagrams forwarded over UDP",
    ["address", "status"],  # status: sent, failed
)

BRIDGE_CLIENTS_CONNECTED = Gauge(
    "bridge_clients_connected",
    "WebSocket clients currently connected",
)

__all__ = ["BRIDGE_FRAMES", "BRIDGE_DATAGRAMS", "BRIDGE_CLIENTS_CONNECTED"]
