import pytest

from reg_notify_github import config, metric
from reg_notify_github.dispatch import DispatchRequest, Dispatcher
from reg_notify_github.metric import _normalize_endpoint, record_request, request_counter
from reg_notify_github.model import ComparisonResult, ConnectionParameters
from reg_notify_github.payload import build_update_status_body


def _count(endpoint, result):
    return request_counter.labels(endpoint=endpoint, result=result)._value.get()


def test_normalize_endpoint_examples():
    assert _normalize_endpoint("https://reg-suit.now.sh/api/update-status") == "update-status"
    assert _normalize_endpoint("https://reg-suit.now.sh/api/comment-to-pr/") == "comment-to-pr"
    assert _normalize_endpoint("https://reg-suit.now.sh") == "/"


def test_record_request_tracks_endpoint_label():
    before = _count("update-status", "ok")
    record_request("https://reg-suit.now.sh/api/update-status", "ok")
    assert _count("update-status", "ok") == before + 1


@pytest.mark.asyncio
async def test_dry_run_is_counted(logger):
    params = ConnectionParameters(owner="o", repository="r", installation_id="1")
    req = DispatchRequest(
        url="https://app.test/api/update-status",
        body=build_update_status_body(ComparisonResult(), params, "abc"),
    )
    before = _count("update-status", "dry_run")
    await Dispatcher(logger, dry_run=True).dispatch([req])
    assert _count("update-status", "dry_run") == before + 1


def test_push_metrics_without_gateway(monkeypatch):
    pushed = []
    monkeypatch.setattr(config, "PUSH_GATEWAY", None)
    monkeypatch.setattr(metric, "push_to_gateway", lambda *a, **kw: pushed.append(a))
    metric.push_metrics()
    assert pushed == []

    monkeypatch.setattr(config, "PUSH_GATEWAY", "localhost:9091")
    metric.push_metrics()
    assert pushed == [("localhost:9091",)]
