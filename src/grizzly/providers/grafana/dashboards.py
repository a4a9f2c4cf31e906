"""Grafana dashboards."""

from __future__ import annotations

import logging
from urllib.parse import quote

from grizzly.core.errors import ParseError
from grizzly.core.provider import Provider
from grizzly.models.resource import Resource
from grizzly.models.results import PreviewOpts
from grizzly.providers.grafana.client import GrafanaClient

logger = logging.getLogger(__name__)


class DashboardProvider(Provider):
    name = "grafana.dashboard"
    json_path = "grafanaDashboards"
    extension = "json"
    kind = "Dashboard"
    server_fields = ("id", "version")

    def __init__(self, client: GrafanaClient):
        self.client = client

    def uid_of(self, name: str, detail: dict) -> str:
        uid = detail.get("uid")
        if not uid:
            raise ParseError(f"Dashboard {name} has no uid")
        return str(uid)

    def get_by_uid(self, uid: str) -> Resource:
        payload = self.client.get_json(f"api/dashboards/uid/{quote(uid, safe='')}")
        dashboard = payload.get("dashboard", {})
        folder_id = payload.get("meta", {}).get("folderId")
        if folder_id:
            dashboard["folderId"] = folder_id
        return self.new_resource(uid, dashboard)

    def _post(self, resource: Resource) -> None:
        dashboard = resource.copy_detail()
        folder_id = dashboard.pop("folderId", 0)
        self.client.post_json("api/dashboards/db", {
            "dashboard": dashboard,
            "folderId": folder_id,
            "overwrite": True,
        })

    def add(self, resource: Resource) -> None:
        self._post(resource)

    def update(self, resource: Resource) -> None:
        self._post(resource)

    def preview(self, resource: Resource, opts: PreviewOpts) -> str:
        dashboard = resource.copy_detail()
        dashboard.pop("folderId", None)
        payload = self.client.post_json("api/snapshots", {
            "dashboard": dashboard,
            "expires": opts.expires,
        })
        url = (payload or {}).get("url", "")
        logger.debug("Snapshot for %s: %s", resource.identity, url)
        return url
