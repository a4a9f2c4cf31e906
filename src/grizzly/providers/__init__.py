"""Built-in providers."""

from __future__ import annotations

from grizzly.config.settings import Settings
from grizzly.core.registry import ProviderRegistry
from grizzly.providers.grafana.client import GrafanaClient
from grizzly.providers.grafana.dashboards import DashboardProvider
from grizzly.providers.grafana.datasources import DatasourceProvider
from grizzly.providers.grafana.synthetic_monitoring import SyntheticMonitoringProvider
from grizzly.providers.mimir.rules import RuleGroupProvider


def default_registry(settings: Settings) -> ProviderRegistry:
    """Register every built-in provider against clients built from ``settings``."""
    grafana = GrafanaClient(
        settings.grafana_url,
        token=settings.grafana_token or None,
        user=settings.grafana_user or None,
        timeout=settings.request_timeout,
    )
    sm = GrafanaClient(
        settings.sm_url,
        token=settings.sm_token or None,
        timeout=settings.request_timeout,
    )
    cortex_headers = {}
    if settings.cortex_tenant_id:
        cortex_headers["X-Scope-OrgID"] = settings.cortex_tenant_id
    cortex = GrafanaClient(
        settings.cortex_address,
        token=settings.cortex_api_key or None,
        user=settings.cortex_tenant_id or None,
        timeout=settings.request_timeout,
        headers=cortex_headers,
    )
    return ProviderRegistry([
        DashboardProvider(grafana),
        DatasourceProvider(grafana),
        SyntheticMonitoringProvider(sm),
        RuleGroupProvider(cortex),
    ])
