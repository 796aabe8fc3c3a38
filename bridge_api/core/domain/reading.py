"""Domain model for motion sensor readings."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

from ...osc.message import ACCELEROMETER_ADDRESS, GYROSCOPE_ADDRESS, OscMessage


@dataclass(frozen=True)
class AccelerometerSample:
    """Acceleration including gravity (m/s^2)."""
    x: float
    y: float
    z: float

    def to_osc(self) -> OscMessage:
        return OscMessage(ACCELEROMETER_ADDRESS, (self.x, self.y, self.z))


@dataclass(frozen=True)
class GyroscopeSample:
    """Rotation rate (deg/s) around the device axes."""
    alpha: float
    beta: float
    gamma: float

    def to_osc(self) -> OscMessage:
        return OscMessage(GYROSCOPE_ADDRESS, (self.alpha, self.beta, self.gamma))


@dataclass
class SensorReading:
    """Sensor reading decoded from one WebSocket frame.

    Lives only for the duration of one forward:
    WebSocket → validation → Dispatcher → OSC/UDP

    A group set to None was absent or unusable in the frame and is not
    forwarded.
    """
    accelerometer: Optional[AccelerometerSample] = None
    gyroscope: Optional[GyroscopeSample] = None

    # Client capture time in ms (Date.now()), informational only
    timestamp: Optional[int] = None
    received_at: float = field(default_factory=time.time)

    @property
    def has_data(self) -> bool:
        return self.accelerometer is not None or self.gyroscope is not None

    def to_osc_messages(self) -> List[OscMessage]:
        """One message per present group, accelerometer first."""
        messages = []
        if self.accelerometer is not None:
            messages.append(self.accelerometer.to_osc())
        if self.gyroscope is not None:
            messages.append(self.gyroscope.to_osc())
        return messages
