from .handler import handle_frame, serve_client, websocket_bridge
from .sessions import ClientRegistry, ClientSession
from .validators import DecodeResult, decode_sensor_frame

__all__ = [
    "handle_frame",
    "serve_client",
    "websocket_bridge",
    "ClientRegistry",
    "ClientSession",
    "DecodeResult",
    "decode_sensor_frame",
]
