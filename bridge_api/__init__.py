"""Motion OSC Bridge.

Receives motion sensor readings from a browser over WebSocket and forwards
them as OSC messages over UDP (Max/MSP, Pd, SuperCollider...).

Layout:
- transports/websocket: ingress, frame validation, client sessions
- osc: OSC message encoding
- forwarder: Dispatcher + UDP sender
- lifecycle.py: outbound socket open/close
- endpoints: static assets, health, metrics, client config
"""

__version__ = "0.1.0"
