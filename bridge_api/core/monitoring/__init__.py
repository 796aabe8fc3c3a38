from .stats import BridgeStats

__all__ = ["BridgeStats"]
