"""Minimal OSC encoding for the bridge.

- encoder.py: byte-level encoding (address, typetags, float32 arguments)
- message.py: OscMessage value object and the addresses used by the bridge
"""

from .encoder import align4, encode_message, encode_osc_string, encoded_length
from .message import ACCELEROMETER_ADDRESS, GYROSCOPE_ADDRESS, OscMessage

__all__ = [
    "align4",
    "encode_message",
    "encode_osc_string",
    "encoded_length",
    "OscMessage",
    "ACCELEROMETER_ADDRESS",
    "GYROSCOPE_ADDRESS",
]
