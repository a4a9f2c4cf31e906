"""Prometheus rule groups on a Cortex/Mimir ruler."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, unquote

import yaml

from grizzly.core.errors import ParseError, ProviderError
from grizzly.core.provider import Provider
from grizzly.models.resource import Manifest, Resource, ResourceList
from grizzly.providers.grafana.client import GrafanaClient

RULES_API = "api/v1/rules"


def group_uid(namespace: str, group_name: str) -> str:
    """``<namespace>/<group>``, each part percent-encoded so neither holds a ``/``."""
    return f"{quote(namespace, safe='')}/{quote(group_name, safe='')}"


def split_group_uid(uid: str) -> tuple[str, str]:
    namespace, sep, group_name = uid.partition("/")
    if not sep or not namespace or not group_name or "/" in group_name:
        raise ProviderError(
            "rule group UID must be <namespace>/<group>", kind=RuleGroupProvider.kind, uid=uid,
        )
    return unquote(namespace), unquote(group_name)


class RuleGroupProvider(Provider):
    """One resource per rule group.

    The template branch maps a rule namespace to ``{"groups": [...]}``; groups
    are list elements, so parsing walks the list instead of map keys.
    """

    name = "mimir.rules"
    json_path = "prometheusRules"
    extension = "yaml"
    kind = "PrometheusRuleGroup"

    def __init__(self, client: GrafanaClient):
        self.client = client

    def parse(self, raw: Any) -> ResourceList:
        resources = ResourceList()
        if raw is None:
            return resources
        if not isinstance(raw, dict):
            raise ParseError(f"{self.json_path}: expected an object, got {type(raw).__name__}")
        for namespace, body in raw.items():
            groups = body.get("groups", []) if isinstance(body, dict) else None
            if not isinstance(groups, list):
                raise ParseError(f"{self.json_path}.{namespace}: groups must be a list")
            for group in groups:
                if not isinstance(group, dict) or not group.get("name"):
                    raise ParseError(f"{self.json_path}.{namespace}: every group needs a name")
                uid = group_uid(namespace, group["name"])
                manifest = Manifest.new(self.api_version, self.kind, uid, {
                    "namespace": namespace,
                    "group": group,
                })
                resources.add(self.parse_manifest(manifest))
        return resources

    def uid_of(self, name: str, detail: dict) -> str:
        return name

    def render(self, detail: Any) -> str:
        return yaml.safe_dump(detail, default_flow_style=False, sort_keys=True)

    def get_by_uid(self, uid: str) -> Resource:
        namespace, group_name = split_group_uid(uid)
        response = self.client.request(
            "GET", f"{RULES_API}/{quote(namespace, safe='')}/{quote(group_name, safe='')}",
        )
        group = yaml.safe_load(response.text) or {}
        return self.new_resource(uid, {"namespace": namespace, "group": group})

    def _post(self, resource: Resource) -> None:
        namespace = resource.detail["namespace"]
        body = yaml.safe_dump(resource.detail["group"], default_flow_style=False, sort_keys=True)
        self.client.request(
            "POST",
            f"{RULES_API}/{quote(namespace, safe='')}",
            data=body.encode("utf-8"),
            headers={"Content-Type": "application/yaml"},
        )

    def add(self, resource: Resource) -> None:
        self._post(resource)

    def update(self, resource: Resource) -> None:
        self._post(resource)
