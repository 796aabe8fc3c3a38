"""Health, readiness and metrics endpoints."""

from fastapi import APIRouter, HTTPException, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Liveness probe: ok whenever the process is running."""
    return {"status": "ok"}


@router.get("/ready")
def ready(request: Request):
    """Readiness probe: the outbound OSC socket is open."""
    sender = request.app.state.dispatcher.sender
    if not sender.is_open:
        raise HTTPException(status_code=503, detail="not ready")
    return {"status": "ready", "destination": sender.destination}


@router.get("/metrics")
def metrics(request: Request):
    """Bridge counters + connected clients."""
    state = request.app.state
    return {
        "bridge": state.stats.to_dict(),
        "clients": state.registry.to_dict(),
    }


@router.get("/metrics/prometheus")
def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
