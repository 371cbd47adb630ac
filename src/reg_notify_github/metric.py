from urllib.parse import urlparse

from prometheus_client import CollectorRegistry, Counter, push_to_gateway

from reg_notify_github import config

push_registry = CollectorRegistry()

request_counter = Counter(
    "reg_notify_requests",
    "Number of notification requests by endpoint and result",
    labelnames=["endpoint", "result"],
    registry=push_registry,
)


def _normalize_endpoint(url: str) -> str:
    path = urlparse(url).path.rstrip("/")
    if not path:
        return "/"
    return path.rsplit("/", 1)[-1]


def record_request(url: str, result: str) -> None:
    request_counter.labels(endpoint=_normalize_endpoint(url), result=result).inc()


def push_metrics(job: str = "reg_notify_github") -> None:
    if config.PUSH_GATEWAY is None:
        return
    push_to_gateway(config.PUSH_GATEWAY, job=job, registry=push_registry)
