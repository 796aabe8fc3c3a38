"""CLI entry point for the bridge."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from common.config import get_settings

from .main import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Motion sensor WebSocket → OSC/UDP bridge")
    p.add_argument("--host", dest="bridge_host", help="interface to listen on (BRIDGE_HOST)")
    p.add_argument("--port", dest="bridge_port", type=int, help="HTTP/WebSocket port (BRIDGE_PORT)")
    p.add_argument("--osc-host", help="OSC destination host (OSC_HOST)")
    p.add_argument("--osc-port", type=int, help="OSC destination UDP port (OSC_PORT)")
    p.add_argument("--web-root", help="directory served to the browser (WEB_ROOT)")
    p.add_argument("--sample-interval-ms", type=int, help="client sampling interval (SAMPLE_INTERVAL_MS)")
    p.add_argument("--log-level", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv=None) -> None:
    p = build_parser()
    args = p.parse_args(argv)

    try:
        settings = get_settings()
    except ValueError as e:
        p.error(str(e))
    settings = settings.with_overrides(**vars(args))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    logger.info("Motion OSC Bridge started")
    logger.info(
        "Config: listen=%s:%d osc=%s:%d web_root=%s",
        settings.bridge_host,
        settings.bridge_port,
        settings.osc_host,
        settings.osc_port,
        settings.web_root,
    )

    # uvicorn exits non-zero if the lifespan startup fails (outbound socket).
    uvicorn.run(
        create_app(settings),
        host=settings.bridge_host,
        port=settings.bridge_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
