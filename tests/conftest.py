"""Pytest configuration and fixtures."""

from __future__ import annotations

import copy
import json
import re

import pytest

from grizzly.config.settings import Config, Settings
from grizzly.core.errors import NotFoundError, ProviderError
from grizzly.core.provider import Provider
from grizzly.core.registry import ProviderRegistry

_PLACEHOLDER_RE = re.compile(r'"([^"]+)"\+::: \{\}')


class FakeProvider(Provider):
    """In-memory provider; ``remote`` plays the part of the remote service."""

    name = "fake.dashboard"
    json_path = "grafanaDashboards"
    kind = "Dashboard"
    server_fields = ("id", "version")

    def __init__(self, remote=None, fail_on=(), json_path=None, kind=None, extension=None):
        self.remote = remote if remote is not None else {}
        self.fail_on = set(fail_on)
        self.calls: list[tuple[str, str]] = []
        self._next_id = 100
        if json_path:
            self.json_path = json_path
            self.name = f"fake.{json_path}"
        if kind:
            self.kind = kind
        if extension:
            self.extension = extension

    def uid_of(self, name, detail):
        return str(detail.get("uid", name))

    def get_by_uid(self, uid):
        self.calls.append(("get", uid))
        if uid not in self.remote:
            raise NotFoundError(f"{uid} not found")
        return self.new_resource(uid, copy.deepcopy(self.remote[uid]))

    def add(self, resource):
        self.calls.append(("add", resource.uid))
        if resource.uid in self.fail_on:
            raise ProviderError("add failed", kind=self.kind, uid=resource.uid)
        self._next_id += 1
        self.remote[resource.uid] = {**resource.copy_detail(), "id": self._next_id, "version": 1}

    def update(self, resource):
        self.calls.append(("update", resource.uid))
        if resource.uid in self.fail_on:
            raise ProviderError("update failed", kind=self.kind, uid=resource.uid)
        detail = resource.copy_detail()
        detail["version"] = detail.get("version", 0) + 1
        self.remote[resource.uid] = detail


class FakeEvaluator:
    """Returns a fixed document, adding the placeholder branches like Jsonnet would."""

    def __init__(self, data=None, output=None, error=None):
        self.data = data or {}
        self.output = output
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def evaluate(self, filename, snippet):
        self.calls.append((filename, snippet))
        if self.error is not None:
            raise self.error
        if self.output is not None:
            return self.output
        doc = copy.deepcopy(self.data)
        for path in _PLACEHOLDER_RE.findall(snippet):
            doc.setdefault(path, {})
        return json.dumps(doc)


def make_resource(provider, uid, **detail):
    return provider.new_resource(uid, {"uid": uid, **detail}, filename=uid)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def settings():
    return Settings(
        grafana_url="http://grafana.test",
        grafana_user="",
        grafana_token="",
        sm_url="http://sm.test",
        sm_token="",
        cortex_address="http://cortex.test",
        cortex_tenant_id="",
        cortex_api_key="",
        jsonnet_paths=["vendor", "lib", "."],
        request_timeout=5,
    )


@pytest.fixture
def make_config(settings):
    def _make(providers, data=None, **evaluator_kwargs):
        return Config(
            settings=settings,
            registry=ProviderRegistry(list(providers)),
            evaluator=FakeEvaluator(data, **evaluator_kwargs),
        )
    return _make


@pytest.fixture
def template(tmp_path):
    path = tmp_path / "main.jsonnet"
    path.write_text("{}\n", encoding="utf-8")
    return path
