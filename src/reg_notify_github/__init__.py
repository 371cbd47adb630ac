from reg_notify_github.client_id import decode_client_id, encode_client_id
from reg_notify_github.dispatch import DispatchOutcome, DispatchRequest, Dispatcher
from reg_notify_github.errors import (
    ApplicationError,
    InvalidClientId,
    NotifyError,
    PluginNotInitialized,
    TransportError,
    classify_error,
)
from reg_notify_github.logger import PluginLogger
from reg_notify_github.model import (
    CommentToPrBody,
    ComparisonResult,
    ConnectionParameters,
    NotifyOptions,
    UpdateStatusBody,
)
from reg_notify_github.plugin import GitHubNotifierPlugin

__all__ = [
    "ApplicationError",
    "CommentToPrBody",
    "ComparisonResult",
    "ConnectionParameters",
    "DispatchOutcome",
    "DispatchRequest",
    "Dispatcher",
    "GitHubNotifierPlugin",
    "InvalidClientId",
    "NotifyError",
    "NotifyOptions",
    "PluginLogger",
    "PluginNotInitialized",
    "TransportError",
    "UpdateStatusBody",
    "classify_error",
    "decode_client_id",
    "encode_client_id",
]
