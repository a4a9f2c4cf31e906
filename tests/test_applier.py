"""Tests for apply and preview."""

import pytest

from conftest import FakeProvider, make_resource
from grizzly.core.applier import apply_resource, apply_resources, preview_resources
from grizzly.core.errors import ProviderError
from grizzly.models.resource import ResourceList
from grizzly.models.results import ApplyStatus, PreviewOpts


def _resources(provider, *uids):
    resources = ResourceList()
    for uid in uids:
        resources.add(make_resource(provider, uid, title=uid.upper()))
    return resources


class TestApplyResource:
    def test_absent_resource_is_added(self):
        provider = FakeProvider()
        result = apply_resource(make_resource(provider, "abc", title="t"))
        assert result.status == ApplyStatus.ADDED
        assert provider.calls == [("get", "abc"), ("add", "abc")]
        assert provider.remote["abc"]["title"] == "t"

    def test_present_resource_is_prepared_and_updated(self):
        provider = FakeProvider(remote={"abc": {"uid": "abc", "title": "old", "id": 12, "version": 4}})
        result = apply_resource(make_resource(provider, "abc", title="new"))
        assert result.status == ApplyStatus.UPDATED
        assert provider.calls == [("get", "abc"), ("update", "abc")]
        assert provider.remote["abc"] == {"uid": "abc", "title": "new", "id": 12, "version": 5}

    def test_unexpected_errors_carry_kind_and_uid(self):
        provider = FakeProvider()

        def broken(resource):
            raise RuntimeError("boom")

        provider.add = broken
        with pytest.raises(ProviderError, match="Dashboard/abc: boom"):
            apply_resource(make_resource(provider, "abc"))


class TestApplyResources:
    def test_applies_every_resource(self):
        provider = FakeProvider(remote={"b": {"uid": "b", "id": 1}})
        results = apply_resources(_resources(provider, "a", "b"))
        assert [(r.uid, r.status) for r in results] == [
            ("a", ApplyStatus.ADDED), ("b", ApplyStatus.UPDATED),
        ]

    def test_fail_fast_leaves_earlier_mutations(self):
        provider = FakeProvider(
            remote={uid: {"uid": uid, "id": i} for i, uid in enumerate("abc")},
            fail_on={"b"},
        )
        seen = []
        with pytest.raises(ProviderError, match="update failed"):
            apply_resources(_resources(provider, "a", "b", "c"), on_result=seen.append)

        assert [r.uid for r in seen] == ["a"]
        assert ("update", "a") in provider.calls
        assert ("update", "b") in provider.calls
        assert not any(uid == "c" for _, uid in provider.calls)
        assert provider.remote["a"]["title"] == "A"
        assert "title" not in provider.remote["c"]

    def test_empty_targets_apply_everything(self):
        provider = FakeProvider()
        results = apply_resources(_resources(provider, "abc", "def"), [])
        assert {r.uid for r in results} == {"abc", "def"}

    def test_target_limits_to_one_resource(self):
        provider = FakeProvider()
        results = apply_resources(_resources(provider, "abc", "def", "ghi"), ["dashboard/abc"])
        assert [r.uid for r in results] == ["abc"]
        assert set(provider.remote) == {"abc"}


class PreviewingProvider(FakeProvider):
    def preview(self, resource, opts):
        self.calls.append(("preview", resource.uid))
        return f"http://grafana.test/dashboard/snapshot/{resource.uid}?expires={opts.expires}"


class TestPreview:
    def test_preview_does_not_touch_remote(self):
        provider = PreviewingProvider()
        results = preview_resources(_resources(provider, "abc"), opts=PreviewOpts(expires=60))
        assert results[0].status == ApplyStatus.PREVIEWED
        assert results[0].message.endswith("abc?expires=60")
        assert provider.remote == {}
        assert provider.calls == [("preview", "abc")]

    def test_unsupported_preview_is_skipped(self):
        provider = FakeProvider()
        seen = []
        results = preview_resources(_resources(provider, "a", "b"), on_result=seen.append)
        assert [r.status for r in results] == [ApplyStatus.SKIPPED, ApplyStatus.SKIPPED]
        assert len(seen) == 2
        assert provider.calls == []

    def test_preview_errors_are_fail_fast(self):
        provider = PreviewingProvider()

        def broken(resource, opts):
            raise ValueError("bad snapshot")

        provider.preview = broken
        with pytest.raises(ProviderError, match="bad snapshot"):
            preview_resources(_resources(provider, "a", "b"))
