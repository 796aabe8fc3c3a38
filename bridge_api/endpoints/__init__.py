"""HTTP endpoints of the bridge.

static_router is a catch-all and must be included last.
"""

from .client_config import router as client_config_router
from .health import router as health_router
from .static_files import router as static_router

__all__ = [
    "client_config_router",
    "health_router",
    "static_router",
]
