"""Forwarding of readings to the OSC destination.

- sender.py: DatagramSender interface and the UDP implementation
- dispatcher.py: reading → one datagram per sensor group
"""

from .dispatcher import Dispatcher
from .sender import DatagramSender, SendResult, SenderError, UdpDatagramSender

__all__ = [
    "Dispatcher",
    "DatagramSender",
    "SendResult",
    "SenderError",
    "UdpDatagramSender",
]
