"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grizzly.core.evaluator import Evaluator
    from grizzly.core.registry import ProviderRegistry


def _env(name: str, default: str = "") -> str:
    return os.environ.get(name, "") or default


def _default_jsonnet_paths() -> list[str]:
    raw = _env("GRIZZLY_JSONNET_PATH", "vendor:lib:.")
    return [p for p in raw.split(":") if p]


def _default_timeout() -> float:
    raw = _env("GRIZZLY_REQUEST_TIMEOUT", "30")
    try:
        return float(raw)
    except ValueError:
        return 30.0


@dataclass
class Settings:
    grafana_url: str = field(default_factory=lambda: _env("GRAFANA_URL", "http://localhost:3000"))
    grafana_user: str = field(default_factory=lambda: _env("GRAFANA_USER"))
    grafana_token: str = field(default_factory=lambda: _env("GRAFANA_TOKEN"))
    sm_url: str = field(
        default_factory=lambda: _env("GRAFANA_SM_URL", "https://synthetic-monitoring-api.grafana.net")
    )
    sm_token: str = field(default_factory=lambda: _env("GRAFANA_SM_TOKEN"))
    cortex_address: str = field(default_factory=lambda: _env("CORTEX_ADDRESS"))
    cortex_tenant_id: str = field(default_factory=lambda: _env("CORTEX_TENANT_ID"))
    cortex_api_key: str = field(default_factory=lambda: _env("CORTEX_API_KEY"))
    jsonnet_paths: list[str] = field(default_factory=_default_jsonnet_paths)
    request_timeout: float = field(default_factory=_default_timeout)
    # Set once at startup from terminal detection; the renderer reads it.
    interactive: bool = False


@dataclass
class Config:
    """Everything a pipeline run needs, built once by the CLI."""

    settings: Settings
    registry: ProviderRegistry
    evaluator: Evaluator
