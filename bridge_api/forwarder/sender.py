"""Outbound datagram senders.

The Dispatcher only knows the DatagramSender interface; the UDP socket is
owned by UdpDatagramSender and opened/closed by the lifecycle manager.
"""

from __future__ import annotations

import logging
import socket
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class SenderError(Exception):
    """The sender could not acquire its socket."""


@dataclass(frozen=True)
class SendResult:
    """Outcome of a single datagram send."""

    ok: bool
    address: str = ""
    nbytes: int = 0
    error: Optional[str] = None


class DatagramSender(ABC):
    """Interface for fire-and-forget datagram transports."""

    @abstractmethod
    def open(self) -> None:
        """Acquire the underlying socket.

        Raises:
            SenderError: if the socket or destination cannot be set up
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the socket. Safe to call more than once."""
        pass

    @abstractmethod
    def send(self, payload: bytes, address: str = "") -> SendResult:
        """Send one datagram without blocking.

        Args:
            payload: encoded OSC message
            address: OSC address of the payload, for logging and metrics

        Returns:
            SendResult; transport errors are reported, never raised
        """
        pass

    @property
    @abstractmethod
    def is_open(self) -> bool:
        pass

    @property
    def destination(self) -> str:
        return ""


class UdpDatagramSender(DatagramSender):
    """Connectionless UDP sender to a fixed host:port.

    The destination is resolved once in open(); sends use a non-blocking
    socket so a full send buffer drops the datagram instead of stalling
    the calling client task.
    """

    def __init__(self, host: str, port: int):
        self._host = host
        self._port = int(port)
        self._sock: Optional[socket.socket] = None
        self._sockaddr: Optional[Tuple] = None

    def open(self) -> None:
        if self._sock is not None:
            return

        try:
            infos = socket.getaddrinfo(self._host, self._port, type=socket.SOCK_DGRAM)
        except socket.gaierror as e:
            raise SenderError(f"Cannot resolve {self._host}:{self._port}: {e}") from e

        family, socktype, proto, _, sockaddr = infos[0]
        try:
            sock = socket.socket(family, socktype, proto)
            sock.setblocking(False)
        except OSError as e:
            raise SenderError(f"Cannot create UDP socket: {e}") from e

        self._sock = sock
        self._sockaddr = sockaddr
        logger.info("[UDP] Socket open, destination %s", self.destination)

    def close(self) -> None:
        if self._sock is None:
            return
        try:
            self._sock.close()
        finally:
            self._sock = None
            logger.info("[UDP] Socket closed")

    def send(self, payload: bytes, address: str = "") -> SendResult:
        if self._sock is None:
            return SendResult(ok=False, address=address, error="sender is closed")

        try:
            nbytes = self._sock.sendto(payload, self._sockaddr)
        except OSError as e:
            # BlockingIOError, ECONNREFUSED from a previous ICMP, ENETUNREACH...
            return SendResult(ok=False, address=address, error=f"{type(e).__name__}: {e}")

        return SendResult(ok=True, address=address, nbytes=nbytes)

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    @property
    def destination(self) -> str:
        return f"{self._host}:{self._port}"
