"""OSC 1.0 message encoder (float arguments only).

Layout of a message, every block 4-byte aligned:

    address   "/accelerometer\\0\\0"     NUL terminated, NUL padded
    typetags  ",fff\\0\\0\\0\\0"           ',' + one 'f' per argument
    arguments 3 x float32 big-endian   no padding needed

The receiver (Max/MSP udpreceive, Pd, SuperCollider...) expects exactly one
message per datagram, so no bundles are produced here.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

# Big-endian IEEE-754 single precision.
OSC_FLOAT32 = np.dtype(">f4")

FLOAT_TAG = "f"


def align4(n: int) -> int:
    """Round n up to the next multiple of 4."""
    return (n + 3) & ~0x03


def encode_osc_string(value: str) -> bytes:
    """Encode an OSC string: ASCII bytes, at least one NUL, padded to 4 bytes.

    Non-ASCII characters are replaced by '?' so the byte length always
    equals the character length.
    """
    raw = value.encode("ascii", errors="replace")
    return raw + b"\x00" * (align4(len(raw) + 1) - len(raw))


def type_tags_for(args: Sequence[float]) -> str:
    return "," + FLOAT_TAG * len(args)


def encode_float_args(args: Sequence[float]) -> bytes:
    """Pack arguments as big-endian float32.

    Values beyond float32 range become +/-inf instead of raising.
    """
    if not args:
        return b""
    with np.errstate(over="ignore"):
        return np.asarray(args, dtype=np.float64).astype(OSC_FLOAT32).tobytes()


def encode_message(address: str, args: Sequence[float]) -> bytes:
    """Encode a single OSC message with float arguments.

    Args:
        address: OSC address pattern, e.g. "/gyroscope"
        args: ordered float arguments

    Returns:
        Datagram payload of length
        align4(len(address) + 1) + align4(len(args) + 2) + 4 * len(args)
    """
    return (
        encode_osc_string(address)
        + encode_osc_string(type_tags_for(args))
        + encode_float_args(args)
    )


def encoded_length(address: str, arg_count: int) -> int:
    return align4(len(address) + 1) + align4(arg_count + 2) + 4 * arg_count
