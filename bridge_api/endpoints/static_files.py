"""Static assets for the browser client (index.html, app.js, styles.css...).

Catch-all route: must be registered after every other HTTP router.
"""

from __future__ import annotations

import errno
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["static"])

INDEX_FILE = "index.html"

CONTENT_TYPES = {
    ".html": "text/html",
    ".js": "text/javascript",
    ".css": "text/css",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpg",
    ".gif": "image/gif",
}
DEFAULT_CONTENT_TYPE = "text/plain"


def content_type_for(path: Path) -> str:
    return CONTENT_TYPES.get(path.suffix.lower(), DEFAULT_CONTENT_TYPE)


def resolve_asset_path(web_root: Path, url_path: str) -> Optional[Path]:
    """Map a URL path to a file under web_root; None if it escapes the root."""
    relative = url_path.lstrip("/") or INDEX_FILE
    root = web_root.resolve()
    candidate = (root / relative).resolve()
    if candidate != root and root not in candidate.parents:
        return None
    return candidate


@router.get("/{file_path:path}", include_in_schema=False)
def static_asset(file_path: str, request: Request):
    # Some tunnels (ngrok) probe with a plain GET carrying the upgrade header.
    if request.headers.get("upgrade", "").lower() == "websocket":
        return Response(status_code=200)

    web_root = Path(request.app.state.settings.web_root)
    path = resolve_asset_path(web_root, file_path)
    if path is None:
        logger.warning("[STATIC] Path outside web root rejected: %s", file_path)
        return PlainTextResponse("File not found", status_code=404)

    try:
        content = path.read_bytes()
    except FileNotFoundError:
        return PlainTextResponse("File not found", status_code=404)
    except OSError as e:
        code = errno.errorcode.get(e.errno, "UNKNOWN") if e.errno else "UNKNOWN"
        logger.warning("[STATIC] Cannot read %s: %s", path, e)
        return PlainTextResponse(f"Server Error: {code}", status_code=500)

    return Response(content=content, media_type=content_type_for(path))
