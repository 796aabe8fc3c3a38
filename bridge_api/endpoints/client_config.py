"""Client-facing configuration, read by the browser page at startup."""

from fastapi import APIRouter, Request

from ..schemas import ClientConfigOut

router = APIRouter(tags=["config"])


@router.get("/config", response_model=ClientConfigOut)
def client_config(request: Request):
    settings = request.app.state.settings
    return ClientConfigOut(sample_interval_ms=settings.sample_interval_ms)
