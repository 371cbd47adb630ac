from dataclasses import dataclass

from reg_notify_github import config

DEFAULT_ENDPOINT = "https://reg-suit.now.sh"


@dataclass(frozen=True)
class GhAppInfo:
    endpoint: str


def get_gh_app_info() -> GhAppInfo:
    endpoint = config.REG_GH_APP_ENDPOINT or DEFAULT_ENDPOINT
    return GhAppInfo(endpoint=endpoint.rstrip("/"))
