"""Grafana Synthetic Monitoring checks.

The check API has no lookup by id, so remote checks are found by listing all
of them and matching on job name. Updates must carry the server-generated
``id`` and ``tenantId``, which ``prepare`` copies from the remote check.
"""

from __future__ import annotations

from grizzly.core.errors import NotFoundError, ParseError
from grizzly.core.provider import Provider
from grizzly.models.resource import Resource
from grizzly.providers.grafana.client import GrafanaClient


class SyntheticMonitoringProvider(Provider):
    name = "grafana.synthetic-monitor"
    json_path = "syntheticMonitoring"
    extension = "json"
    kind = "SyntheticMonitoringCheck"
    server_fields = ("tenantId", "id", "modified", "created")
    prepare_fields = ("tenantId", "id")

    def __init__(self, client: GrafanaClient):
        self.client = client

    def uid_of(self, name: str, detail: dict) -> str:
        job = detail.get("job")
        if not job:
            raise ParseError(f"Synthetic monitoring check {name} has no job")
        return str(job)

    def get_by_uid(self, uid: str) -> Resource:
        checks = self.client.get_json("api/v1/check/list") or []
        for check in checks:
            if check.get("job") == uid:
                return self.new_resource(uid, check)
        raise NotFoundError(f"{self.kind} {uid} not found")

    def add(self, resource: Resource) -> None:
        self.client.post_json("api/v1/check/add", resource.detail)

    def update(self, resource: Resource) -> None:
        self.client.post_json("api/v1/check/update", resource.detail)
