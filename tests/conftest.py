"""Shared fixtures: a sender that records datagrams instead of using the network."""

from typing import Any, Dict, List, Tuple

import pytest

from bridge_api.core.monitoring.stats import BridgeStats
from bridge_api.forwarder.dispatcher import Dispatcher
from bridge_api.forwarder.sender import DatagramSender, SendResult, SenderError


class RecordingSender(DatagramSender):
    """Captures (address, payload) pairs; optionally fails every send."""

    def __init__(self, fail_sends: bool = False, fail_open: bool = False):
        self.datagrams: List[Tuple[str, bytes]] = []
        self.fail_sends = fail_sends
        self.fail_open = fail_open
        self.open_calls = 0
        self.close_calls = 0
        self._open = False

    def open(self) -> None:
        self.open_calls += 1
        if self.fail_open:
            raise SenderError("Cannot resolve nowhere.invalid:7400")
        self._open = True

    def close(self) -> None:
        self.close_calls += 1
        self._open = False

    def send(self, payload: bytes, address: str = "") -> SendResult:
        if self.fail_sends:
            return SendResult(ok=False, address=address, error="OSError: [Errno 101] Network is unreachable")
        self.datagrams.append((address, payload))
        return SendResult(ok=True, address=address, nbytes=len(payload))

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def destination(self) -> str:
        return "recording:7400"

    @property
    def addresses(self) -> List[str]:
        return [address for address, _ in self.datagrams]


@pytest.fixture
def recording_sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def stats() -> BridgeStats:
    return BridgeStats()


@pytest.fixture
def dispatcher(recording_sender, stats) -> Dispatcher:
    return Dispatcher(recording_sender, stats)


@pytest.fixture
def sensor_frame() -> Dict[str, Any]:
    """Frame as sent by the browser client."""
    return {
        "type": "sensorData",
        "accelerometer": {"x": 0.12, "y": 9.81, "z": -0.35},
        "gyroscope": {"alpha": 1.5, "beta": -2.25, "gamma": 0.0},
        "timestamp": 1706688000123,
    }
