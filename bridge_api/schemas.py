from __future__ import annotations

import math
from typing import Any, Literal, Optional

from pydantic import BaseModel, field_validator

SENSOR_DATA_TYPE = "sensorData"


def _require_finite_number(v: Any) -> Any:
    # JSON numbers only: "1.5", true or null would otherwise be coerced.
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError(f"must be a number, got {type(v).__name__}")
    if not math.isfinite(v):
        raise ValueError("must be finite")
    return v


class AccelerometerIn(BaseModel):
    x: float
    y: float
    z: float

    @field_validator("x", "y", "z", mode="before")
    @classmethod
    def validate_axis(cls, v):
        return _require_finite_number(v)


class GyroscopeIn(BaseModel):
    alpha: float
    beta: float
    gamma: float

    @field_validator("alpha", "beta", "gamma", mode="before")
    @classmethod
    def validate_axis(cls, v):
        return _require_finite_number(v)


class SensorDataEnvelope(BaseModel):
    """Frame sent by the browser client.

    Expected format:
    {
        "type": "sensorData",
        "accelerometer": {"x": 0.12, "y": 9.81, "z": -0.3},
        "gyroscope": {"alpha": 1.5, "beta": -0.25, "gamma": 0.0},
        "timestamp": 1706688000123
    }

    Both group keys must be present; their content is validated per group
    (AccelerometerIn / GyroscopeIn) so one bad group does not discard the
    other.
    """

    type: Literal["sensorData"]
    accelerometer: Any
    gyroscope: Any
    timestamp: Optional[int] = None


class ClientConfigOut(BaseModel):
    sample_interval_ms: int
    websocket_path: str = "/"
