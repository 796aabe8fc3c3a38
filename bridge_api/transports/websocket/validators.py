"""Validation of inbound WebSocket frames.

Turns a raw frame (text or binary JSON) into a typed SensorReading, or a
structured error. Nothing here raises: the handler logs the error and
keeps the connection open.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Type, Union

import orjson
from pydantic import BaseModel, ValidationError

from ...core.domain.reading import AccelerometerSample, GyroscopeSample, SensorReading
from ...schemas import SENSOR_DATA_TYPE, AccelerometerIn, GyroscopeIn, SensorDataEnvelope

logger = logging.getLogger(__name__)


@dataclass
class DecodeResult:
    """Result of decoding one frame."""

    valid: bool
    reading: Optional[SensorReading] = None
    error: Optional[str] = None
    warnings: list[str] = None

    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []


def _format_validation_error(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "frame"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def _parse_group(
    model: Type[BaseModel],
    name: str,
    value: Any,
    warnings: list[str],
) -> Optional[BaseModel]:
    """Validate one sensor group; an unusable group is skipped, not zero-filled."""
    if not isinstance(value, dict):
        warnings.append(f"{name} skipped: expected an object, got {type(value).__name__}")
        return None
    try:
        return model.model_validate(value)
    except ValidationError as e:
        warnings.append(f"{name} skipped: {_format_validation_error(e)}")
        return None


def decode_sensor_frame(raw: Union[str, bytes]) -> DecodeResult:
    """Decode a WebSocket frame into a SensorReading.

    Args:
        raw: frame payload, text or UTF-8 encoded bytes

    Returns:
        DecodeResult with the reading, or valid=False and the reason
    """
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        return DecodeResult(valid=False, error=f"Invalid JSON: {e}")

    if not isinstance(data, dict):
        return DecodeResult(
            valid=False,
            error=f"Frame must be a JSON object, got {type(data).__name__}",
        )

    msg_type = data.get("type")
    if msg_type != SENSOR_DATA_TYPE:
        return DecodeResult(valid=False, error=f"Unknown message type: {msg_type!r}")

    try:
        envelope = SensorDataEnvelope.model_validate(data)
    except ValidationError as e:
        return DecodeResult(valid=False, error=_format_validation_error(e))

    warnings: list[str] = []
    accel = _parse_group(AccelerometerIn, "accelerometer", envelope.accelerometer, warnings)
    gyro = _parse_group(GyroscopeIn, "gyroscope", envelope.gyroscope, warnings)

    reading = SensorReading(
        accelerometer=AccelerometerSample(accel.x, accel.y, accel.z) if accel else None,
        gyroscope=GyroscopeSample(gyro.alpha, gyro.beta, gyro.gamma) if gyro else None,
        timestamp=envelope.timestamp,
    )

    if not reading.has_data:
        return DecodeResult(
            valid=False,
            error="No usable sensor group",
            warnings=warnings,
        )

    return DecodeResult(valid=True, reading=reading, warnings=warnings)
