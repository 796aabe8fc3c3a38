"""Frame validation tests.

Run:
    pytest tests/test_validators.py -v
"""

import json

import pytest

from bridge_api.core.domain.reading import AccelerometerSample, GyroscopeSample
from bridge_api.transports.websocket.validators import decode_sensor_frame


def _frame(data) -> str:
    return json.dumps(data)


# =============================================================================
# VALID FRAMES
# =============================================================================

class TestValidFrames:

    def test_full_frame(self, sensor_frame):
        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is True
        assert result.error is None
        assert result.warnings == []
        reading = result.reading
        assert reading.accelerometer == AccelerometerSample(0.12, 9.81, -0.35)
        assert reading.gyroscope == GyroscopeSample(1.5, -2.25, 0.0)
        assert reading.timestamp == 1706688000123

    def test_binary_frame(self, sensor_frame):
        result = decode_sensor_frame(_frame(sensor_frame).encode("utf-8"))
        assert result.valid is True

    def test_integers_are_accepted_as_floats(self, sensor_frame):
        sensor_frame["accelerometer"] = {"x": 0, "y": 10, "z": -1}

        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is True
        assert result.reading.accelerometer == AccelerometerSample(0.0, 10.0, -1.0)

    def test_timestamp_is_optional(self, sensor_frame):
        del sensor_frame["timestamp"]

        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is True
        assert result.reading.timestamp is None

    def test_extra_fields_are_ignored(self, sensor_frame):
        sensor_frame["orientation"] = {"heading": 90}
        sensor_frame["accelerometer"]["interval"] = 16

        assert decode_sensor_frame(_frame(sensor_frame)).valid is True


# =============================================================================
# PARTIAL GROUPS
# =============================================================================

class TestPartialGroups:
    """An unusable group is skipped; the other one is still forwarded."""

    def test_null_accelerometer_keeps_gyroscope(self, sensor_frame):
        sensor_frame["accelerometer"] = None

        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is True
        assert result.reading.accelerometer is None
        assert result.reading.gyroscope is not None
        assert any("accelerometer" in w for w in result.warnings)

    def test_missing_axis_skips_group(self, sensor_frame):
        del sensor_frame["gyroscope"]["gamma"]

        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is True
        assert result.reading.gyroscope is None
        assert result.reading.accelerometer is not None
        assert "gamma" in str(result.warnings)

    @pytest.mark.parametrize("bad_value", ["1.5", None, True, [1.0], {"v": 1}])
    def test_non_numeric_axis_skips_group(self, sensor_frame, bad_value):
        sensor_frame["gyroscope"]["beta"] = bad_value

        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is True
        assert result.reading.gyroscope is None
        assert "beta" in str(result.warnings)

    def test_group_not_an_object(self, sensor_frame):
        sensor_frame["accelerometer"] = [0.1, 0.2, 0.3]

        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is True
        assert result.reading.accelerometer is None
        assert "expected an object" in str(result.warnings)

    def test_no_usable_group_is_rejected(self, sensor_frame):
        sensor_frame["accelerometer"] = {}
        sensor_frame["gyroscope"] = None

        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is False
        assert "no usable sensor group" in result.error.lower()
        assert len(result.warnings) == 2


# =============================================================================
# MALFORMED FRAMES
# =============================================================================

class TestMalformedFrames:

    def test_invalid_json(self):
        result = decode_sensor_frame("{not json")

        assert result.valid is False
        assert "invalid json" in result.error.lower()

    def test_nan_literal_is_not_json(self):
        raw = '{"type": "sensorData", "accelerometer": {"x": NaN, "y": 0, "z": 0}, "gyroscope": null}'
        assert decode_sensor_frame(raw).valid is False

    def test_invalid_utf8_bytes(self):
        assert decode_sensor_frame(b"\xff\xfe{}").valid is False

    def test_not_an_object(self):
        result = decode_sensor_frame("[1, 2, 3]")

        assert result.valid is False
        assert "object" in result.error

    @pytest.mark.parametrize("msg_type", ["reading", "", None, 42])
    def test_unknown_type(self, sensor_frame, msg_type):
        sensor_frame["type"] = msg_type

        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is False
        assert "unknown message type" in result.error.lower()

    def test_missing_type(self, sensor_frame):
        del sensor_frame["type"]
        assert decode_sensor_frame(_frame(sensor_frame)).valid is False

    def test_missing_accelerometer_key(self, sensor_frame):
        del sensor_frame["accelerometer"]

        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is False
        assert "accelerometer" in result.error
        assert result.reading is None

    def test_missing_gyroscope_key(self, sensor_frame):
        del sensor_frame["gyroscope"]

        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is False
        assert "gyroscope" in result.error

    def test_invalid_timestamp(self, sensor_frame):
        sensor_frame["timestamp"] = "yesterday"

        result = decode_sensor_frame(_frame(sensor_frame))

        assert result.valid is False
        assert "timestamp" in result.error

    def test_empty_frame(self):
        assert decode_sensor_frame("").valid is False
        assert decode_sensor_frame("{}").valid is False
