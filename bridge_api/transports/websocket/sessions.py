"""Registry of connected WebSocket clients."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Dict, Optional

from ...metrics import BRIDGE_CLIENTS_CONNECTED

logger = logging.getLogger(__name__)


@dataclass
class ClientSession:
    session_id: str
    peer: str
    connected_at: float = field(default_factory=time.time)
    frames_received: int = 0
    frames_rejected: int = 0

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "peer": self.peer,
            "connected_at": self.connected_at,
            "frames_received": self.frames_received,
            "frames_rejected": self.frames_rejected,
        }


class ClientRegistry:
    """Tracks open client sessions.

    Sessions share nothing but this registry and the outbound sender; a
    reconnecting client gets a new session.
    """

    def __init__(self):
        self._sessions: Dict[str, ClientSession] = {}

    def register(self, peer: str) -> ClientSession:
        session = ClientSession(session_id=str(uuid.uuid4()), peer=peer)
        self._sessions[session.session_id] = session
        BRIDGE_CLIENTS_CONNECTED.set(len(self._sessions))
        return session

    def deregister(self, session_id: str) -> Optional[ClientSession]:
        session = self._sessions.pop(session_id, None)
        BRIDGE_CLIENTS_CONNECTED.set(len(self._sessions))
        return session

    def get(self, session_id: str) -> Optional[ClientSession]:
        return self._sessions.get(session_id)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def to_dict(self) -> dict:
        return {
            "active": len(self._sessions),
            "sessions": [s.to_dict() for s in self._sessions.values()],
        }
