"""OSC message value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .encoder import encode_message, type_tags_for

ACCELEROMETER_ADDRESS = "/accelerometer"
GYROSCOPE_ADDRESS = "/gyroscope"


@dataclass(frozen=True)
class OscMessage:
    """One outbound OSC message: address pattern + float arguments."""

    address: str
    args: Tuple[float, ...]

    @property
    def type_tags(self) -> str:
        return type_tags_for(self.args)

    def encode(self) -> bytes:
        return encode_message(self.address, self.args)
