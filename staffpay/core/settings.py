from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


@dataclass(slots=True)
class Settings:
    api_base_url: str | None = None
    api_timeout: float = 15.0
    cors_origins: list[str] = field(default_factory=list)
    log_level: str = "INFO"
    company_name: str = ""


def _load_defaults(path: Path) -> dict:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fp:
        return yaml.safe_load(fp) or {}


def load_settings(path: Path | None = None) -> Settings:
    """Read ``settings.yaml`` and apply environment overrides."""

    data = _load_defaults(path or CONFIG_DIR / "settings.yaml")

    api_base_url = os.getenv("STAFFPAY_API_BASE_URL") or data.get("api_base_url") or None
    timeout_env = os.getenv("STAFFPAY_API_TIMEOUT")
    api_timeout = float(timeout_env) if timeout_env else float(data.get("api_timeout", 15.0))

    origins_env = os.getenv("API_CORS_ORIGINS", "")
    origins = [origin.strip() for origin in origins_env.split(",") if origin.strip()]
    if not origins:
        origins = [str(origin) for origin in data.get("cors_origins") or []]

    log_level = (os.getenv("STAFFPAY_LOG_LEVEL") or data.get("log_level") or "INFO").upper()

    return Settings(
        api_base_url=api_base_url.rstrip("/") if api_base_url else None,
        api_timeout=api_timeout,
        cors_origins=origins,
        log_level=log_level,
        company_name=str(data.get("company_name") or ""),
    )
