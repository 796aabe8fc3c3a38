"""Bridge processing statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class BridgeStats:
    """Counters shared by every client task of the bridge."""

    frames_received: int = 0
    frames_rejected: int = 0
    readings_forwarded: int = 0
    datagrams_sent: int = 0
    send_failures: int = 0
    clients_connected: int = 0
    last_message_at: float = 0
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __str__(self) -> str:
        return (
            f"Stats: frames={self.frames_received} rejected={self.frames_rejected} "
            f"forwarded={self.readings_forwarded} datagrams={self.datagrams_sent} "
            f"send_failures={self.send_failures} clients={self.clients_connected}"
        )

    def to_dict(self) -> dict:
        return {
            "frames_received": self.frames_received,
            "frames_rejected": self.frames_rejected,
            "readings_forwarded": self.readings_forwarded,
            "datagrams_sent": self.datagrams_sent,
            "send_failures": self.send_failures,
            "clients_connected": self.clients_connected,
            "last_message_at": self.last_message_at,
            "started_at": self.started_at.isoformat(),
            "send_success_rate": self._send_success_rate(),
        }

    def _send_success_rate(self) -> float:
        total = self.datagrams_sent + self.send_failures
        if total == 0:
            return 1.0
        return self.datagrams_sent / total

    def reset(self):
        self.frames_received = 0
        self.frames_rejected = 0
        self.readings_forwarded = 0
        self.datagrams_sent = 0
        self.send_failures = 0
        self.last_message_at = 0
        self.started_at = datetime.now(timezone.utc)
