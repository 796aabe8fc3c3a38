"""Ingress transports of the bridge (WebSocket only)."""
