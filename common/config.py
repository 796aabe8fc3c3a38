from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv


def _default_env_file() -> str:
    # .env next to where the bridge is launched, same place as the web root by default.
    return str(Path.cwd() / ".env")


@dataclass(frozen=True)
class Settings:
    bridge_host: str
    bridge_port: int

    osc_host: str
    osc_port: int

    web_root: str
    sample_interval_ms: int

    log_level: str

    def with_overrides(self, **overrides) -> "Settings":
        """Copy of the settings with the non-None overrides applied (CLI flags)."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw!r}")


def get_settings() -> Settings:
    # Load env file (if present) but still allow overriding via real environment variables.
    env_file = os.getenv("BRIDGE_ENV_FILE", _default_env_file())
    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    bridge_host = os.getenv("BRIDGE_HOST", "0.0.0.0")
    bridge_port = _env_int("BRIDGE_PORT", "9000")

    # Max/MSP [udpreceive 7400] on the same machine by default.
    osc_host = os.getenv("OSC_HOST", "127.0.0.1")
    osc_port = _env_int("OSC_PORT", "7400")

    web_root = os.getenv("WEB_ROOT", str(Path.cwd()))
    sample_interval_ms = _env_int("SAMPLE_INTERVAL_MS", "100")

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    return Settings(
        bridge_host=bridge_host,
        bridge_port=bridge_port,
        osc_host=osc_host,
        osc_port=osc_port,
        web_root=web_root,
        sample_interval_ms=sample_interval_ms,
        log_level=log_level,
    )
