"""Grafana datasources, identified by name."""

from __future__ import annotations

from urllib.parse import quote

from grizzly.core.errors import ParseError, ProviderError
from grizzly.core.provider import Provider
from grizzly.models.resource import Resource
from grizzly.providers.grafana.client import GrafanaClient


class DatasourceProvider(Provider):
    name = "grafana.datasource"
    json_path = "grafanaDatasources"
    extension = "json"
    kind = "Datasource"
    server_fields = ("id", "orgId", "version", "readOnly")
    prepare_fields = ("id", "orgId")

    def __init__(self, client: GrafanaClient):
        self.client = client

    def uid_of(self, name: str, detail: dict) -> str:
        ds_name = detail.get("name")
        if not ds_name:
            raise ParseError(f"Datasource {name} has no name")
        return str(ds_name)

    def get_by_uid(self, uid: str) -> Resource:
        detail = self.client.get_json(f"api/datasources/name/{quote(uid, safe='')}")
        return self.new_resource(uid, detail)

    def add(self, resource: Resource) -> None:
        self.client.post_json("api/datasources", resource.detail)

    def update(self, resource: Resource) -> None:
        ds_id = resource.detail.get("id")
        if ds_id is None:
            raise ProviderError(
                "cannot update a datasource without an id", kind=self.kind, uid=resource.uid,
            )
        self.client.put_json(f"api/datasources/{ds_id}", resource.detail)
